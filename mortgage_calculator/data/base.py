"""Protocol definitions for data sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class InterestRateSource(Protocol):
    async def get_latest_rate(self) -> float:
        """Get the latest annual interest rate as a percentage (5.25 means 5.25%).

        Implementations return their fallback rate instead of raising.
        """
        ...
