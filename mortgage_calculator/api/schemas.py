"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, model_validator

from mortgage_calculator.config import settings


# ---- Request schemas ----

class MortgageRequest(BaseModel):
    property_price: float = Field(..., gt=0, allow_inf_nan=False, description="Property price in GBP")
    deposit: float = Field(..., ge=0, allow_inf_nan=False, description="Deposit in GBP")
    mortgage_term_in_years: float = Field(
        ..., gt=0, le=settings.max_term_years, allow_inf_nan=False
    )
    annual_interest_rate: float | None = Field(
        None,
        ge=0,
        allow_inf_nan=False,
        description="Annual rate as a percentage (5.25 means 5.25%). Defaults to the latest Bank Rate.",
    )

    @model_validator(mode="after")
    def deposit_within_price(self) -> "MortgageRequest":
        if self.deposit > self.property_price:
            raise ValueError("deposit cannot exceed property_price")
        return self


# ---- Response schemas ----

class YearlySnapshotResponse(BaseModel):
    year: int
    remaining_debt: float


class MortgageResponse(BaseModel):
    annual_interest_rate: float
    monthly_payment: float
    total_repayment: float
    capital: float
    interest: float
    affordability_check: float
    yearly_breakdown: list[YearlySnapshotResponse]


class InterestRateResponse(BaseModel):
    annual_interest_rate: float
