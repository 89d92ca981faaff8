"""
Unit tests for the error taxonomy and error responses.
"""

import json

import pytest

from order_documents.handlers.utils.errors import (
    ORDER_NOT_FOUND_MESSAGE,
    BaseServiceError,
    ErrorCategory,
    MalformedInputError,
    OrderNotFoundError,
    UpstreamFailureError,
    create_error_response,
    get_http_status_code,
)


class TestErrorTaxonomy:

    @pytest.mark.parametrize("error, status_code", [
        (MalformedInputError("Request body is empty"), 400),
        (UpstreamFailureError("connection refused"), 400),
        (OrderNotFoundError("abcd1234"), 404),
        (BaseServiceError("boom", error_code="SOMETHING_ELSE"), 400),
    ])
    def test_status_codes(self, error, status_code):
        assert get_http_status_code(error) == status_code

    def test_categories(self):
        assert MalformedInputError("x").category == ErrorCategory.VALIDATION
        assert UpstreamFailureError("x").category == ErrorCategory.EXTERNAL_SERVICE
        assert OrderNotFoundError("x").category == ErrorCategory.BUSINESS_LOGIC

    def test_every_category_has_an_error(self):
        errors = [MalformedInputError("x"), UpstreamFailureError("x"), OrderNotFoundError("x")]

        assert {error.category for error in errors} == set(ErrorCategory)

    def test_not_found_message_is_fixed(self):
        error = OrderNotFoundError("abcd1234")

        assert str(error) == ORDER_NOT_FOUND_MESSAGE
        assert error.resource_id == "abcd1234"

    def test_upstream_keeps_status_code(self):
        error = UpstreamFailureError("permission denied for view detalhes_pedido", status_code=401)

        assert error.status_code == 401
        assert error.to_dict()["error_code"] == "UPSTREAM_FAILURE"


class TestCreateErrorResponse:

    def test_body_shape(self):
        response = create_error_response(404, ORDER_NOT_FOUND_MESSAGE)

        assert response.status_code == 404
        assert json.loads(response.body) == {"erro": "Pedido não encontrado"}
