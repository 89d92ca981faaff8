"""
Order Export Lambda Function - Entry point for the CSV export API.

Delegates to the export handler of the order_documents package.
"""

from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from order_documents.handlers.export_handler import lambda_handler as export_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for order CSV exports.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return export_handler(event, context)
