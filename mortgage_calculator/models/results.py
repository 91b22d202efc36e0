from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoanParameters:
    property_price: float
    deposit: float
    annual_interest_rate: float  # Percent, e.g. 5.25 for 5.25%
    mortgage_term_in_years: float


@dataclass(frozen=True)
class YearlySnapshot:
    year: int
    remaining_debt: float


@dataclass(frozen=True)
class MortgageResult:
    monthly_payment: float
    total_repayment: float
    capital: float
    interest: float
    affordability_check: float  # Monthly payment at rate + 3pp
    yearly_breakdown: list[YearlySnapshot] = field(default_factory=list)
