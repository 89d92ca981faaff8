"""
Data Access Layer (DAL) for the order details view.

This module defines the interface the business logic depends on and a factory
building the REST implementation from the handler configuration.
"""

from typing import Optional, Protocol, runtime_checkable

from order_documents.models.order_line import OrderLineRow


@runtime_checkable
class OrderDetailsDal(Protocol):
    """Protocol defining the order details read interface."""

    def fetch_order_lines(self, order_id: str, authorization: Optional[str] = None) -> list[OrderLineRow]:
        """Return every line of an order, in the data source's natural order."""
        ...


def get_dal_handler(
    rest_url: str,
    api_key: str,
    view_name: str = 'detalhes_pedido',
    timeout_seconds: float = 10.0,
) -> OrderDetailsDal:
    """
    Factory function to get the order details DAL handler.

    Args:
        rest_url: Base URL of the REST data endpoint
        api_key: Public API key of the data project
        view_name: Name of the order details view
        timeout_seconds: Request timeout

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from order_documents.dal.order_details_handler import RestOrderDetailsHandler

    return RestOrderDetailsHandler(
        rest_url=rest_url,
        api_key=api_key,
        view_name=view_name,
        timeout_seconds=timeout_seconds,
    )


__all__ = [
    'OrderDetailsDal',
    'get_dal_handler',
]
