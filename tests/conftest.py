"""Shared test fixtures.

Fixture: £100K property, £5K deposit, 5.25% (the fallback Bank Rate), 15yr.
"""

import pytest

from mortgage_calculator.models.results import LoanParameters


class FixedRateSource:
    """Stands in for the Bank of England client."""

    def __init__(self, rate: float):
        self.rate = rate
        self.calls = 0

    async def get_latest_rate(self) -> float:
        self.calls += 1
        return self.rate


@pytest.fixture
def canonical_loan() -> LoanParameters:
    return LoanParameters(
        property_price=100000,
        deposit=5000,
        annual_interest_rate=5.25,
        mortgage_term_in_years=15,
    )


@pytest.fixture
def fixed_rate_source() -> FixedRateSource:
    return FixedRateSource(4.5)
