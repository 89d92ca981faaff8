"""
Error taxonomy and error-response utilities for the order document handlers.

Every failure a request can hit is one of three tagged errors: the caller sent
something unusable, the data source failed, or the order does not exist. All
of them surface to the client with the same ``{"erro": <message>}`` body; only
the status code differs.
"""

import uuid
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types
from aws_lambda_powertools.metrics import MetricUnit

from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.models.output import ErrorOutput

ORDER_NOT_FOUND_MESSAGE = 'Pedido não encontrado'


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    BUSINESS_LOGIC = "BUSINESS_LOGIC"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_LOGIC,
        resource_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.resource_id = resource_id
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "resource_id": self.resource_id,
        }


class MalformedInputError(BaseServiceError):
    """Raised when the request body is missing, not JSON, or lacks ``pedido_id``."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="MALFORMED_INPUT",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
        )


class UpstreamFailureError(BaseServiceError):
    """Raised when the order data source cannot be queried."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            message=message,
            error_code="UPSTREAM_FAILURE",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
        )
        self.status_code = status_code


class OrderNotFoundError(BaseServiceError):
    """Raised when the order details query returns no rows."""

    def __init__(self, order_id: str):
        super().__init__(
            message=ORDER_NOT_FOUND_MESSAGE,
            error_code="ORDER_NOT_FOUND",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.BUSINESS_LOGIC,
            resource_id=order_id,
        )
        self.order_id = order_id


class ConfigurationError(Exception):
    """Raised at cold start when required environment variables are missing or invalid."""


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""
    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_severity": error.severity.value,
            "error_category": error.category.value,
            "error_message": error.message,
            "resource_id": error.resource_id,
        }
    )


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "MALFORMED_INPUT": 400,
        "UPSTREAM_FAILURE": 400,
        "ORDER_NOT_FOUND": 404,
    }

    return status_mapping.get(error.error_code, 400)


def create_error_response(status_code: int, message: str) -> Response:
    """Create the ``{"erro": ...}`` JSON response shared by every failure path."""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=ErrorOutput(erro=message).model_dump_json(),
    )
