"""
Unit tests for value formatting helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from order_documents.logic.formatting import display_order_id, format_currency, format_order_date


class TestFormatCurrency:

    @pytest.mark.parametrize("value, expected", [
        (30, "30.00"),
        (10 * 3, "30.00"),
        (1234.5, "1234.50"),
        (0, "0.00"),
        (15.999, "16.00"),
        (0.1 + 0.2, "0.30"),
    ])
    def test_two_decimal_places(self, value, expected):
        assert format_currency(value) == expected


class TestFormatOrderDate:

    def test_naive_date(self):
        assert format_order_date(datetime(2024, 1, 15)) == "15/01/2024"

    def test_zero_padding(self):
        assert format_order_date(datetime(2024, 3, 2, 14, 30)) == "02/03/2024"

    def test_aware_timestamp_is_converted_to_utc(self):
        late_evening_sao_paulo = datetime(2024, 1, 15, 22, 10, tzinfo=timezone(timedelta(hours=-3)))

        assert format_order_date(late_evening_sao_paulo) == "16/01/2024"


class TestDisplayOrderId:

    def test_truncates_and_upper_cases(self):
        assert display_order_id("abcd1234-5678-90ef") == "ABCD1234"

    def test_short_identifier_is_kept_whole(self):
        assert display_order_id("ab12") == "AB12"
