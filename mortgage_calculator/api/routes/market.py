"""Market data routes."""

from fastapi import APIRouter, Depends

from mortgage_calculator.api.schemas import InterestRateResponse
from mortgage_calculator.api.deps import get_rate_source
from mortgage_calculator.data.base import InterestRateSource

router = APIRouter(prefix="/api/v1/market", tags=["market"])


@router.get("/interest-rate", response_model=InterestRateResponse)
async def get_interest_rate(rates: InterestRateSource = Depends(get_rate_source)):
    """Latest Bank of England base rate, or the configured default if unavailable."""
    return InterestRateResponse(annual_interest_rate=await rates.get_latest_rate())
