"""
Environment variable models for type-safe configuration.

Both Lambda functions read their configuration once, at cold start, through
this model. Missing or invalid values stop the function from initializing
instead of surfacing later as blank URLs or keys.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

from order_documents.handlers.utils.errors import ConfigurationError


class HandlerEnvVars(BaseModel):
    """Environment variables for the order document handlers."""

    # Data API base URL, e.g. https://<project>.supabase.co
    SUPABASE_URL: Annotated[str, Field(
        description='Base URL of the order data API',
        min_length=1,
        pattern=r'^https?://'
    )]

    SUPABASE_ANON_KEY: Annotated[str, Field(
        description='Public API key sent as the "apikey" header',
        min_length=1
    )]

    # Reserved for email delivery; nothing sends mail yet
    RESEND_API_KEY: Annotated[Optional[str], Field(
        default=None,
        description='Email provider API key (reserved, unused)'
    )] = None

    ORDER_DETAILS_VIEW: Annotated[str, Field(
        default='detalhes_pedido',
        description='View holding one row per order line item',
        min_length=1
    )] = 'detalhes_pedido'

    DATA_SOURCE_TIMEOUT_SECONDS: Annotated[float, Field(
        default=10.0,
        description='Timeout for the order details request in seconds',
        ge=1,
        le=60
    )] = 10.0

    CSV_STRICT_QUOTING: Annotated[str, Field(
        default='false',
        description='Escape CSV fields per RFC 4180 (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='order-documents',
        description='Service name for AWS Powertools'
    )] = 'order-documents'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origin for API responses'
    )] = '*'

    @property
    def rest_url(self) -> str:
        """Base URL of the REST data endpoint."""
        return f"{self.SUPABASE_URL.rstrip('/')}/rest/v1"

    @property
    def csv_strict_quoting(self) -> bool:
        """Check if RFC 4180 CSV escaping is enabled."""
        return self.CSV_STRICT_QUOTING.lower() == 'true'


def load_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for the Lambda handlers.

    Returns:
        Validated environment variables model instance

    Raises:
        ConfigurationError: If a required variable is missing or invalid
    """
    try:
        return get_environment_variables(model=HandlerEnvVars)
    except ValueError as e:
        raise ConfigurationError(f"Invalid handler configuration: {e}") from e
