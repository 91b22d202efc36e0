"""FastAPI dependency injection."""

from mortgage_calculator.config import settings
from mortgage_calculator.data.base import InterestRateSource
from mortgage_calculator.data.boe import BankOfEnglandClient


def get_rate_source() -> InterestRateSource:
    return BankOfEnglandClient(fallback_rate=settings.default_interest_rate)
