"""
Business Logic Layer for order documents.

Looks an order up through the data access layer and turns its rows into the
confirmation email body or the CSV export.
"""

from dataclasses import dataclass
from typing import Optional

from aws_lambda_powertools.metrics import MetricUnit

from order_documents.dal import OrderDetailsDal
from order_documents.handlers.utils.errors import OrderNotFoundError
from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.logic.confirmation_renderer import render_confirmation_html
from order_documents.logic.csv_renderer import render_order_csv
from order_documents.models.order_line import OrderLineRow
from order_documents.models.output import ConfirmationOutput

CONFIRMATION_MESSAGE = 'Confirmação processada'


@dataclass(frozen=True)
class PreparedConfirmation:
    """A rendered confirmation email, ready for a mail transport."""

    recipient: str
    subject: str
    html: str
    output: ConfirmationOutput


@dataclass(frozen=True)
class CsvExport:
    """A rendered CSV export and the file name it is served under."""

    filename: str
    content: str


class OrderDocumentService:
    """Business logic service for order confirmation and export documents."""

    def __init__(
        self,
        order_details_dal: OrderDetailsDal,
        csv_strict_quoting: bool = False,
    ):
        """
        Initialize order document service.

        Args:
            order_details_dal: Reader for the order details view
            csv_strict_quoting: Apply RFC 4180 escaping to CSV exports
        """
        self.order_details_dal = order_details_dal
        self.csv_strict_quoting = csv_strict_quoting

    @tracer.capture_method
    def get_order_lines(self, order_id: str, authorization: Optional[str] = None) -> list[OrderLineRow]:
        """
        Fetch the rows of an order, treating an empty result as not found.

        Raises:
            OrderNotFoundError: If the order has no rows
            UpstreamFailureError: If the data source fails
        """
        rows = self.order_details_dal.fetch_order_lines(order_id, authorization)

        if not rows:
            logger.info("Order not found", extra={"order_id": order_id})
            metrics.add_metric(name="OrderNotFound", unit=MetricUnit.Count, value=1)
            raise OrderNotFoundError(order_id=order_id)

        return rows

    @tracer.capture_method
    def prepare_confirmation(self, order_id: str, authorization: Optional[str] = None) -> PreparedConfirmation:
        """
        Build the confirmation email for an order.

        No email is sent; the recipient and subject are logged instead.
        """
        rows = self.get_order_lines(order_id, authorization)
        order = rows[0]

        html = render_confirmation_html(rows)
        subject = f"Pedido Confirmado #{order.short_order_id}"

        logger.info(f"📧 Email preparado para: {order.customer_email}")
        logger.info(f"Assunto: {subject}")
        metrics.add_metric(name="ConfirmationPrepared", unit=MetricUnit.Count, value=1)

        return PreparedConfirmation(
            recipient=order.customer_email,
            subject=subject,
            html=html,
            output=ConfirmationOutput(
                sucesso=True,
                mensagem=CONFIRMATION_MESSAGE,
                pedido=order.order_id,
                cliente=order.customer_email,
            ),
        )

    @tracer.capture_method
    def export_csv(self, order_id: str, authorization: Optional[str] = None) -> CsvExport:
        """Build the CSV export of an order."""
        rows = self.get_order_lines(order_id, authorization)

        content = render_order_csv(rows, strict_quoting=self.csv_strict_quoting)
        metrics.add_metric(name="CsvExported", unit=MetricUnit.Count, value=1)

        logger.info("Order exported to CSV", extra={
            "order_id": order_id,
            "line_count": len(rows),
        })

        # File name follows the requested id, not the stored one
        return CsvExport(filename=f"pedido_{order_id[:8]}.csv", content=content)
