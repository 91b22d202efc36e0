"""Tests for the Bank of England base rate client."""

import asyncio
from datetime import date

import httpx

from mortgage_calculator.config import settings
from mortgage_calculator.data.base import InterestRateSource
from mortgage_calculator.data.boe import (
    BankOfEnglandClient,
    format_date_for_boe,
    one_month_before,
    parse_latest_rate,
)

SAMPLE_CSV = """
IUMABEDR
Date,Value
01/Jan/2024,5.25
15/Jan/2024,5.25
01/Feb/2024,5.00
"""


def _client(handler, fallback_rate: float = 5.25) -> BankOfEnglandClient:
    return BankOfEnglandClient(
        fallback_rate=fallback_rate, transport=httpx.MockTransport(handler)
    )


def _fetch(client: BankOfEnglandClient, today: date = date(2024, 2, 15)) -> float:
    return asyncio.run(client.get_latest_rate(today=today))


class TestFormatDate:
    def test_january(self):
        assert format_date_for_boe(date(2024, 1, 15)) == "15/Jan/2024"

    def test_july(self):
        assert format_date_for_boe(date(2024, 7, 22)) == "22/Jul/2024"

    def test_single_digit_day_not_padded(self):
        assert format_date_for_boe(date(2023, 12, 5)) == "5/Dec/2023"


class TestOneMonthBefore:
    def test_mid_month(self):
        assert one_month_before(date(2024, 2, 15)) == date(2024, 1, 15)

    def test_wraps_year(self):
        assert one_month_before(date(2024, 1, 10)) == date(2023, 12, 10)

    def test_clamps_to_month_end(self):
        assert one_month_before(date(2024, 3, 31)) == date(2024, 2, 29)


class TestParseLatestRate:
    def test_takes_last_numeric_line(self):
        assert parse_latest_rate(SAMPLE_CSV) == 5.00

    def test_skips_trailing_junk(self):
        assert parse_latest_rate(SAMPLE_CSV + "Source,Bank of England\n\n") == 5.00

    def test_no_rate(self):
        assert parse_latest_rate("Invalid CSV data") is None

    def test_empty(self):
        assert parse_latest_rate("") is None


class TestBankOfEnglandClient:
    def test_satisfies_protocol(self):
        assert isinstance(BankOfEnglandClient(), InterestRateSource)

    def test_latest_rate(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=SAMPLE_CSV)

        assert _fetch(_client(handler)) == 5.00
        assert len(requests) == 1
        url = str(requests[0].url)
        assert url.startswith("https://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp")
        assert "SeriesCodes=IUMABEDR" in url

    def test_requests_last_month(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=SAMPLE_CSV)

        _fetch(_client(handler), today=date(2024, 2, 15))
        params = requests[0].url.params
        assert params["Datefrom"] == "15/Jan/2024"
        assert params["Dateto"] == "15/Feb/2024"
        assert params["CSVF"] == "TN"

    def test_network_error_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Network error", request=request)

        assert _fetch(_client(handler)) == 5.25

    def test_error_status_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="Not Found")

        assert _fetch(_client(handler)) == 5.25

    def test_unparseable_body_falls_back(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="Invalid CSV data")

        assert _fetch(_client(handler)) == 5.25

    def test_custom_fallback(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        assert _fetch(_client(handler, fallback_rate=4.0)) == 4.0

    def test_default_fallback_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "default_interest_rate", 4.75)
        assert BankOfEnglandClient().fallback_rate == 4.75
