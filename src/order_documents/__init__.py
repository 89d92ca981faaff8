"""
Order Documents Service Package.

Serverless handlers that look up an order in the order details view and
render it as a confirmation email body (HTML) or a downloadable report (CSV).

- handlers: Lambda entry points, routing and error boundary
- logic: document rendering and order lookup rules
- dal: data access for the order details view
- models: request, row and response schemas
"""

__version__ = "1.0.0"
__description__ = "Order confirmation and CSV export Lambda functions"

from order_documents.models.order_line import OrderLineRow
from order_documents.models.input import OrderLookupRequest
from order_documents.models.output import ConfirmationOutput, ErrorOutput

__all__ = [
    "OrderLineRow",
    "OrderLookupRequest",
    "ConfirmationOutput",
    "ErrorOutput",
]
