"""
Order Confirmation Lambda Function - Entry point for the confirmation API.

Delegates to the confirmation handler of the order_documents package.
"""

from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from order_documents.handlers.confirmation_handler import lambda_handler as confirmation_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for order confirmations.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return confirmation_handler(event, context)
