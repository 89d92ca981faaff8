"""
Business Logic Layer Module.

Sits between the Lambda handlers and the data access layer:

- order_document_service: order lookup and document assembly
- confirmation_renderer: HTML confirmation email body
- csv_renderer: CSV export
- formatting: currency, date and order number formatting
"""

from order_documents.logic.confirmation_renderer import render_confirmation_html
from order_documents.logic.csv_renderer import CSV_HEADERS, render_order_csv
from order_documents.logic.order_document_service import CsvExport, OrderDocumentService, PreparedConfirmation

__all__ = [
    "CSV_HEADERS",
    "CsvExport",
    "OrderDocumentService",
    "PreparedConfirmation",
    "render_confirmation_html",
    "render_order_csv",
]
