"""
Data Access Layer (DAL) for the order details REST view.

Reads the ``detalhes_pedido`` view through the PostgREST-compatible data API
of the backend project. The caller's ``Authorization`` header is forwarded
unchanged so the data source applies its own row-level security.
"""

import time
from typing import Any, Dict, List, Optional

import httpx
from aws_lambda_powertools.metrics import MetricUnit
from pydantic import TypeAdapter, ValidationError

from order_documents.handlers.utils.errors import UpstreamFailureError
from order_documents.handlers.utils.observability import logger, metrics, tracer
from order_documents.models.order_line import OrderLineRow

_ROWS_ADAPTER = TypeAdapter(List[OrderLineRow])


class RestOrderDetailsHandler:
    """Order details reader backed by the REST data API."""

    def __init__(
        self,
        rest_url: str,
        api_key: str,
        view_name: str = 'detalhes_pedido',
        timeout_seconds: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the REST handler.

        Args:
            rest_url: Base URL of the REST endpoint, e.g. ``https://x.supabase.co/rest/v1``
            api_key: Project API key sent as the ``apikey`` header
            view_name: Name of the order details view
            timeout_seconds: Request timeout in seconds
            client: Optional pre-built HTTP client (used by tests)
        """
        self.rest_url = rest_url.rstrip('/')
        self.api_key = api_key
        self.view_name = view_name
        self.client = client or httpx.Client(timeout=timeout_seconds)

        logger.debug("Order details handler initialized", extra={
            "rest_url": self.rest_url,
            "view_name": view_name,
            "timeout_seconds": timeout_seconds,
        })

    def _build_headers(self, authorization: Optional[str]) -> Dict[str, str]:
        # Without a caller token the data API expects the project key as bearer
        return {
            'apikey': self.api_key,
            'Authorization': authorization or f'Bearer {self.api_key}',
            'Accept': 'application/json',
        }

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Return the data API's error message, falling back to the HTTP status line."""
        try:
            payload: Any = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and payload.get('message'):
            return str(payload['message'])

        return f"{response.status_code} {response.reason_phrase}".strip()

    @tracer.capture_method
    def fetch_order_lines(self, order_id: str, authorization: Optional[str] = None) -> list[OrderLineRow]:
        """
        Fetch every line item row of an order.

        Args:
            order_id: Order identifier to filter on
            authorization: Caller's ``Authorization`` header, forwarded as-is

        Returns:
            Rows in the data source's natural order, possibly empty

        Raises:
            UpstreamFailureError: If the request fails or the payload is unusable
        """
        url = f"{self.rest_url}/{self.view_name}"
        params = {'select': '*', 'pedido_id': f'eq.{order_id}'}

        start_time = time.time()
        try:
            response = self.client.get(url, params=params, headers=self._build_headers(authorization))
        except httpx.HTTPError as e:
            logger.error("Order details request failed", extra={
                "order_id": order_id,
                "error": str(e),
            })
            raise UpstreamFailureError(message=str(e)) from e
        finally:
            duration_ms = (time.time() - start_time) * 1000
            metrics.add_metric(name="OrderDetailsQueryLatency", unit=MetricUnit.Milliseconds, value=duration_ms)

        if response.is_error:
            message = self._extract_error_message(response)
            logger.error("Order details query rejected", extra={
                "order_id": order_id,
                "status_code": response.status_code,
                "error": message,
            })
            raise UpstreamFailureError(message=message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamFailureError(message=f"Invalid JSON from order details view: {e}") from e

        if not isinstance(payload, list):
            raise UpstreamFailureError(message="Unexpected order details payload: expected a list of rows")

        try:
            rows = _ROWS_ADAPTER.validate_python(payload)
        except ValidationError as e:
            raise UpstreamFailureError(message=f"Invalid order details row: {e}") from e

        logger.info("Order details fetched", extra={
            "order_id": order_id,
            "row_count": len(rows),
            "duration_ms": round(duration_ms, 2),
        })

        return rows
