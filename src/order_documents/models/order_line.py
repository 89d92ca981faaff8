"""
Order line domain model.

One ``OrderLineRow`` is one row of the ``detalhes_pedido`` view: a single order
joined with one of its line items. Attributes use English names; the aliases
are the view's column names so rows validate straight from the data API.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderLineRow(BaseModel):
    """One (order, line item) row of the order details view."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra='ignore')

    order_id: Annotated[str, Field(
        alias='pedido_id',
        min_length=1,
        description='Order identifier',
        examples=['abcd1234-5678-90ef-1234-567890abcdef']
    )]

    order_date: Annotated[datetime, Field(
        alias='data_pedido',
        description='Timestamp when the order was placed'
    )]

    status: Annotated[str, Field(
        description='Order status as stored',
        examples=['pago', 'pendente']
    )]

    customer_name: Annotated[str, Field(
        alias='nome_cliente',
        description='Customer name'
    )]

    customer_email: Annotated[str, Field(
        alias='email_cliente',
        description='Customer email address'
    )]

    customer_phone: Annotated[Optional[str], Field(
        alias='telefone_cliente',
        default=None,
        description='Customer phone number, if any'
    )] = None

    product_name: Annotated[str, Field(
        alias='nome_produto',
        description='Product name for this line item'
    )]

    quantity: Annotated[int, Field(
        alias='quantidade',
        gt=0,
        description='Quantity ordered for this line item'
    )]

    unit_price: Annotated[float, Field(
        alias='preco_unitario',
        description='Unit price of the product'
    )]

    subtotal: Annotated[float, Field(
        description='Line subtotal (quantity x unit price, as computed by the view)'
    )]

    order_total: Annotated[float, Field(
        alias='valor_total',
        description='Order total, repeated on every row of the order'
    )]

    @field_validator('order_date', mode='before')
    @classmethod
    def parse_order_date(cls, v: Any) -> Any:
        """Accept plain ``YYYY-MM-DD`` dates as well as full ISO timestamps."""
        if isinstance(v, str):
            return datetime.fromisoformat(v.strip())
        return v

    @property
    def short_order_id(self) -> str:
        """First eight characters of the order identifier, case preserved."""
        return self.order_id[:8]
