"""
HTML rendering of the order confirmation email body.
"""

from typing import Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from order_documents.logic.formatting import display_order_id, format_currency, format_order_date
from order_documents.models.order_line import OrderLineRow

CONFIRMATION_TEMPLATE = 'order_confirmation.html'

_environment = Environment(
    loader=PackageLoader('order_documents', 'templates'),
    autoescape=select_autoescape(['html']),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def render_confirmation_html(rows: Sequence[OrderLineRow]) -> str:
    """
    Render the confirmation email body for one order.

    The first row supplies the order-level fields; every row becomes one item
    entry, in input order.

    Args:
        rows: Non-empty line item rows of a single order

    Returns:
        Complete HTML document

    Raises:
        ValueError: If ``rows`` is empty
    """
    if not rows:
        raise ValueError("Cannot render a confirmation without order lines")

    order = rows[0]
    items = [
        {
            'product_name': row.product_name,
            'quantity': row.quantity,
            'unit_price': format_currency(row.unit_price),
            'subtotal': format_currency(row.subtotal),
        }
        for row in rows
    ]

    template = _environment.get_template(CONFIRMATION_TEMPLATE)
    return template.render(
        order_number=display_order_id(order.order_id),
        order_date=format_order_date(order.order_date),
        status=order.status.upper(),
        items=items,
        order_total=format_currency(order.order_total),
    )
