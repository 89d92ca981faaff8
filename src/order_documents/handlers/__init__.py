"""
AWS Lambda Handlers Module.

Entry points of the two order document functions:

- confirmation_handler: prepares the order confirmation email
- export_handler: serves the order as a CSV download

Handler modules load their configuration at import time, so they are not
re-exported here; import them directly.
"""

from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.handlers.utils.rest_api_resolver import CONFIRMATION_PATH, EXPORT_PATH

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "CONFIRMATION_PATH",
    "EXPORT_PATH",
]
