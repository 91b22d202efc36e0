"""Bank of England client for the official Bank Rate."""

import calendar
import logging
import math
from datetime import date

import httpx

from mortgage_calculator.config import settings

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date_for_boe(d: date) -> str:
    """Format a date the way the IADB endpoint expects, e.g. 15/Jan/2024."""
    return f"{d.day}/{MONTH_ABBREVIATIONS[d.month - 1]}/{d.year}"


def one_month_before(d: date) -> date:
    """Same day in the previous month, clamped to that month's last day."""
    if d.month == 1:
        year, month = d.year - 1, 12
    else:
        year, month = d.year, d.month - 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def parse_latest_rate(csv_text: str) -> float | None:
    """Return the rate from the last CSV line whose second column is numeric."""
    lines = [line for line in csv_text.splitlines() if line.strip()]
    for line in reversed(lines):
        columns = line.split(",")
        if len(columns) < 2:
            continue
        try:
            rate = float(columns[1].strip())
        except ValueError:
            continue
        if math.isfinite(rate):
            return rate
    return None


class BankOfEnglandClient:
    def __init__(
        self,
        fallback_rate: float | None = None,
        series_code: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.fallback_rate = (
            fallback_rate if fallback_rate is not None else settings.default_interest_rate
        )
        self.series_code = series_code or settings.boe_series_code
        self.base_url = settings.boe_base_url
        self._transport = transport

    def _params(self, today: date) -> dict[str, str]:
        return {
            "csv.x": "yes",
            "Datefrom": format_date_for_boe(one_month_before(today)),
            "Dateto": format_date_for_boe(today),
            "SeriesCodes": self.series_code,
            "CSVF": "TN",
            "UsingCodes": "Y",
            "VPD": "Y",
            "VFD": "N",
        }

    async def _get_csv(self, today: date) -> str:
        async with httpx.AsyncClient(
            timeout=settings.boe_timeout_seconds, transport=self._transport
        ) as client:
            resp = await client.get(self.base_url, params=self._params(today))
            resp.raise_for_status()
            return resp.text

    async def get_latest_rate(self, today: date | None = None) -> float:
        """Fetch the most recent Bank Rate observation from the last month.

        Falls back to self.fallback_rate on any HTTP failure or when the
        response holds no parseable rate.
        """
        today = today or date.today()
        try:
            csv_text = await self._get_csv(today)
        except httpx.HTTPError as e:
            logger.warning(
                "BoE rate request failed for %s, using fallback %.2f%%: %s",
                self.series_code, self.fallback_rate, e,
            )
            return self.fallback_rate

        rate = parse_latest_rate(csv_text)
        if rate is None:
            logger.warning(
                "No rate found in BoE response for %s, using fallback %.2f%%",
                self.series_code, self.fallback_rate,
            )
            return self.fallback_rate

        logger.debug("BoE %s latest rate: %.2f%%", self.series_code, rate)
        return rate
