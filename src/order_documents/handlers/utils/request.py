"""
Request body parsing shared by both handlers.
"""

import json

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import ValidationError

from order_documents.handlers.utils.errors import MalformedInputError
from order_documents.models.input import OrderLookupRequest


def parse_lookup_request(event: APIGatewayProxyEvent) -> OrderLookupRequest:
    """
    Extract and validate ``{"pedido_id": ...}`` from the request body.

    Raises:
        MalformedInputError: If the body is empty, not JSON, or fails validation
    """
    body = event.decoded_body
    if not body:
        raise MalformedInputError("Request body is empty")

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON in request body: {e}") from e

    try:
        return OrderLookupRequest.model_validate(payload)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
            for error in e.errors()
        )
        raise MalformedInputError(f"Invalid request body: {details}") from e
