"""
REST API resolver factory for the order document Lambda functions.

Each function owns its own resolver; this module gives them the same CORS
setup and the same error boundary, so every failure leaves the function as
``{"erro": <message>}``.
"""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.metrics import MetricUnit

from order_documents.handlers.utils.errors import (
    BaseServiceError,
    create_error_response,
    get_http_status_code,
    log_error_metrics,
)
from order_documents.handlers.utils.observability import logger, metrics

# API path constants
CONFIRMATION_PATH = '/enviar-confirmacao-pedido'
EXPORT_PATH = '/exportar-pedido-csv'


def build_app(allow_origin: str = '*') -> APIGatewayRestResolver:
    """
    Create an API Gateway REST resolver with CORS and the shared exception handlers.

    Args:
        allow_origin: CORS allowed origin

    Returns:
        Configured resolver
    """
    cors_config = CORSConfig(
        allow_origin=allow_origin,
        max_age=600,
        allow_headers=["content-type", "authorization", "apikey", "x-client-info"],
    )
    app = APIGatewayRestResolver(cors=cors_config)

    @app.not_found
    def handle_unknown_route(error: NotFoundError) -> Response:
        logger.warning("Request to unknown route", extra={"path": app.current_event.path})
        return create_error_response(404, "Route not found")

    @app.exception_handler(BaseServiceError)
    def handle_service_error(error: BaseServiceError) -> Response:
        log_error_metrics(error)
        return create_error_response(get_http_status_code(error), error.message)

    @app.exception_handler(Exception)
    def handle_unexpected_error(error: Exception) -> Response:
        logger.exception("Unexpected error in handler", extra={"error": str(error)})
        metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
        return create_error_response(400, str(error))

    return app
