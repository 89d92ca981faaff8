"""
Order Confirmation Handler - Lambda function preparing the confirmation email.

Looks up an order, renders its confirmation email body and reports who it
would be sent to. Email delivery itself is not implemented.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response, content_types
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from order_documents.dal import get_dal_handler
from order_documents.handlers.models.env_vars import load_handler_env_vars
from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.handlers.utils.request import parse_lookup_request
from order_documents.handlers.utils.rest_api_resolver import CONFIRMATION_PATH, build_app
from order_documents.logic.order_document_service import OrderDocumentService

# Fail fast at cold start on missing configuration
env_vars = load_handler_env_vars()

app = build_app(allow_origin=env_vars.CORS_ALLOW_ORIGIN)

order_details_dal = get_dal_handler(
    rest_url=env_vars.rest_url,
    api_key=env_vars.SUPABASE_ANON_KEY,
    view_name=env_vars.ORDER_DETAILS_VIEW,
    timeout_seconds=env_vars.DATA_SOURCE_TIMEOUT_SECONDS,
)
document_service = OrderDocumentService(order_details_dal=order_details_dal)


@app.post(CONFIRMATION_PATH)
@tracer.capture_method
def send_order_confirmation() -> Response:
    """
    Prepare the confirmation email of an order.

    Returns:
        ``{sucesso, mensagem, pedido, cliente}`` on success
    """
    request = parse_lookup_request(app.current_event)
    authorization = app.current_event.headers.get("Authorization")

    logger.info("Order confirmation requested", extra={"order_id": request.order_id})
    tracer.put_annotation("order_id", request.order_id)

    confirmation = document_service.prepare_confirmation(
        order_id=request.order_id,
        authorization=authorization,
    )

    return Response(
        status_code=200,
        content_type=content_types.APPLICATION_JSON,
        body=confirmation.output.model_dump_json(),
    )


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="ConfirmationRequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "order-confirmation")

    return app.resolve(event, context)
