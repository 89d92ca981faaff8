"""
Value formatting shared by the HTML and CSV renderers.
"""

from datetime import datetime, timezone


def format_currency(value: float) -> str:
    """Format a monetary amount with exactly two decimal places, e.g. ``1234.50``."""
    return f"{value:.2f}"


def format_order_date(value: datetime) -> str:
    """
    Format a date the pt-BR way (``dd/mm/yyyy``).

    Aware timestamps are converted to UTC first; naive ones are taken as UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime('%d/%m/%Y')


def display_order_id(order_id: str) -> str:
    """Short, upper-cased order number shown to customers."""
    return order_id[:8].upper()
