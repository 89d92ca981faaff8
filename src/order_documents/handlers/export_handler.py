"""
Order Export Handler - Lambda function serving an order as a CSV download.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from order_documents.dal import get_dal_handler
from order_documents.handlers.models.env_vars import load_handler_env_vars
from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.handlers.utils.request import parse_lookup_request
from order_documents.handlers.utils.rest_api_resolver import EXPORT_PATH, build_app
from order_documents.logic.order_document_service import OrderDocumentService

CSV_CONTENT_TYPE = 'text/csv; charset=utf-8'

# Fail fast at cold start on missing configuration
env_vars = load_handler_env_vars()

app = build_app(allow_origin=env_vars.CORS_ALLOW_ORIGIN)

order_details_dal = get_dal_handler(
    rest_url=env_vars.rest_url,
    api_key=env_vars.SUPABASE_ANON_KEY,
    view_name=env_vars.ORDER_DETAILS_VIEW,
    timeout_seconds=env_vars.DATA_SOURCE_TIMEOUT_SECONDS,
)
document_service = OrderDocumentService(
    order_details_dal=order_details_dal,
    csv_strict_quoting=env_vars.csv_strict_quoting,
)


@app.post(EXPORT_PATH)
@tracer.capture_method
def export_order_csv() -> Response:
    """
    Export an order's line items as a CSV attachment.

    Returns:
        CSV body with a ``Content-Disposition: attachment`` header
    """
    request = parse_lookup_request(app.current_event)
    authorization = app.current_event.headers.get("Authorization")

    logger.info("Order CSV export requested", extra={"order_id": request.order_id})
    tracer.put_annotation("order_id", request.order_id)

    export = document_service.export_csv(
        order_id=request.order_id,
        authorization=authorization,
    )

    return Response(
        status_code=200,
        content_type=CSV_CONTENT_TYPE,
        body=export.content,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
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
    metrics.add_metric(name="ExportRequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "order-export")

    return app.resolve(event, context)
