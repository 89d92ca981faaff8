"""
Service Models Package

Pydantic models used throughout the service: the request body, the order line
rows read from the data source, and the response bodies.
"""

from .input import OrderLookupRequest
from .order_line import OrderLineRow
from .output import ConfirmationOutput, ErrorOutput

__all__ = [
    # Input models
    "OrderLookupRequest",

    # Output models
    "ConfirmationOutput",
    "ErrorOutput",

    # Domain models
    "OrderLineRow",
]
