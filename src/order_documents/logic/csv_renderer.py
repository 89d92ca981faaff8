"""
CSV export of an order's line items.

By default name fields are wrapped in double quotes as-is, which breaks on
names containing quotes. ``strict_quoting`` switches to RFC 4180 escaping;
for names without special characters both modes produce the same bytes.
"""

from typing import List, Sequence

from order_documents.logic.formatting import display_order_id, format_currency, format_order_date
from order_documents.models.order_line import OrderLineRow

CSV_HEADERS = [
    'ID do Pedido',
    'Data',
    'Status',
    'Cliente',
    'Email',
    'Telefone',
    'Produto',
    'Quantidade',
    'Preco Unitario',
    'Subtotal',
    'Total do Pedido',
]

MISSING_PHONE = 'N/A'
_SPECIAL_CHARACTERS = (',', '"', '\n', '\r')


def _quote(value: str, strict: bool) -> str:
    if strict:
        value = value.replace('"', '""')
    return f'"{value}"'


def _escape(value: str, strict: bool) -> str:
    if strict and any(char in value for char in _SPECIAL_CHARACTERS):
        return _quote(value, strict)
    return value


def _build_line(row: OrderLineRow, is_first: bool, strict: bool) -> List[str]:
    return [
        display_order_id(row.order_id),
        format_order_date(row.order_date),
        _escape(row.status, strict),
        _quote(row.customer_name, strict),
        _escape(row.customer_email, strict),
        _escape(row.customer_phone or MISSING_PHONE, strict),
        _quote(row.product_name, strict),
        str(row.quantity),
        format_currency(row.unit_price),
        format_currency(row.subtotal),
        # order total only once, on the first line
        format_currency(row.order_total) if is_first else '',
    ]


def render_order_csv(rows: Sequence[OrderLineRow], strict_quoting: bool = False) -> str:
    """
    Render an order's line items as CSV text.

    Args:
        rows: Non-empty line item rows of a single order
        strict_quoting: Apply RFC 4180 escaping instead of plain quote wrapping

    Returns:
        Header line plus one line per row, joined by ``\\n`` without a trailing newline

    Raises:
        ValueError: If ``rows`` is empty
    """
    if not rows:
        raise ValueError("Cannot export an order without order lines")

    lines = [','.join(CSV_HEADERS)]
    for index, row in enumerate(rows):
        lines.append(','.join(_build_line(row, index == 0, strict_quoting)))

    return '\n'.join(lines)
