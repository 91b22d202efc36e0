"""Mortgage calculation routes."""

import logging

from fastapi import APIRouter, Depends

from mortgage_calculator.api.schemas import (
    MortgageRequest,
    MortgageResponse,
    YearlySnapshotResponse,
)
from mortgage_calculator.api.deps import get_rate_source
from mortgage_calculator.data.base import InterestRateSource
from mortgage_calculator.engine.repayment import calculate_mortgage_for
from mortgage_calculator.models.results import LoanParameters, MortgageResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


def _result_to_response(result: MortgageResult, annual_interest_rate: float) -> MortgageResponse:
    return MortgageResponse(
        annual_interest_rate=annual_interest_rate,
        monthly_payment=result.monthly_payment,
        total_repayment=result.total_repayment,
        capital=result.capital,
        interest=result.interest,
        affordability_check=result.affordability_check,
        yearly_breakdown=[
            YearlySnapshotResponse(year=s.year, remaining_debt=s.remaining_debt)
            for s in result.yearly_breakdown
        ],
    )


@router.post("/calculate", response_model=MortgageResponse)
async def calculate(
    req: MortgageRequest,
    rates: InterestRateSource = Depends(get_rate_source),
):
    """Monthly payment, totals, affordability check and yearly breakdown.

    When no rate is supplied the latest Bank Rate is used.
    """
    rate = req.annual_interest_rate
    if rate is None:
        rate = await rates.get_latest_rate()
        logger.info("No rate supplied, using %.2f%%", rate)

    params = LoanParameters(
        property_price=req.property_price,
        deposit=req.deposit,
        annual_interest_rate=rate,
        mortgage_term_in_years=req.mortgage_term_in_years,
    )
    return _result_to_response(calculate_mortgage_for(params), rate)
