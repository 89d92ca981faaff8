"""
Pytest configuration and shared fixtures for the order document handlers.

The handler modules validate their configuration at import time, so the test
environment is set up here, before any test module is collected.
"""

import os
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import Mock

import pytest

os.environ.update({
    "SUPABASE_URL": "https://test-project.supabase.co",
    "SUPABASE_ANON_KEY": "test-anon-key",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read the environment on every lookup
    "POWERTOOLS_SERVICE_NAME": "test-order-documents",
    "POWERTOOLS_METRICS_NAMESPACE": "TestOrderDocuments",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
})

from order_documents.models.order_line import OrderLineRow  # noqa: E402

ORDER_ID = "abcd1234-5678-90ef-1234-567890abcdef"


class FakeOrderDetailsDal:
    """In-memory order details reader recording every call."""

    def __init__(self, rows: Optional[List[OrderLineRow]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def fetch_order_lines(self, order_id: str, authorization: Optional[str] = None) -> List[OrderLineRow]:
        self.calls.append({"order_id": order_id, "authorization": authorization})
        if self.error is not None:
            raise self.error
        return list(self.rows)


# Sample data fixtures
@pytest.fixture
def single_row_data() -> Dict[str, Any]:
    """One order line exactly as the order details view returns it."""
    return {
        "pedido_id": ORDER_ID,
        "data_pedido": "2024-01-15",
        "status": "pago",
        "nome_cliente": "Ana Silva",
        "email_cliente": "ana@x.com",
        "telefone_cliente": None,
        "nome_produto": "Caneca",
        "quantidade": 2,
        "preco_unitario": 15.00,
        "subtotal": 30.00,
        "valor_total": 30.00,
    }


@pytest.fixture
def multi_row_data() -> List[Dict[str, Any]]:
    """Three lines of the same order."""
    common = {
        "pedido_id": ORDER_ID,
        "data_pedido": "2024-03-02T14:30:00+00:00",
        "status": "enviado",
        "nome_cliente": "Bruno Costa",
        "email_cliente": "bruno@example.com",
        "telefone_cliente": "+55 11 99999-0000",
        "valor_total": 1234.5,
    }
    return [
        {**common, "nome_produto": "Camiseta", "quantidade": 3, "preco_unitario": 10, "subtotal": 30},
        {**common, "nome_produto": "Boné", "quantidade": 1, "preco_unitario": 54.5, "subtotal": 54.5},
        {**common, "nome_produto": "Jaqueta", "quantidade": 2, "preco_unitario": 575, "subtotal": 1150},
    ]


@pytest.fixture
def single_row(single_row_data) -> List[OrderLineRow]:
    return [OrderLineRow.model_validate(single_row_data)]


@pytest.fixture
def multi_rows(multi_row_data) -> List[OrderLineRow]:
    return [OrderLineRow.model_validate(row) for row in multi_row_data]


@pytest.fixture
def fake_dal_factory() -> Callable[..., FakeOrderDetailsDal]:
    """Build fake order details readers returning rows or raising an error."""
    return FakeOrderDetailsDal


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway REST proxy events for the handlers."""

    def build(
        path: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        method: str = "POST",
    ) -> Dict[str, Any]:
        request_headers = {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        }
        request_headers.update(headers or {})
        return {
            "httpMethod": method,
            "path": path,
            "resource": path,
            "headers": request_headers,
            "multiValueHeaders": {key: [value] for key, value in request_headers.items()},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-order-documents"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-order-documents"
    context.memory_limit_in_mb = "512"
    context.remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-order-documents"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
