"""Repayment mortgage calculations.

Pure functions: floats in, dataclass out. No I/O, no validation.
Rates are annual percentages (5.25 means 5.25%), terms are in years.
"""

import math

from mortgage_calculator.models.results import LoanParameters, MortgageResult, YearlySnapshot

STRESS_TEST_MARGIN = 3.0  # Percentage points added for the affordability check
MONTHS_PER_YEAR = 12


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 gives +/-inf and 0/0 gives nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _monthly_rate(annual_interest_rate: float) -> float:
    return annual_interest_rate / 100 / MONTHS_PER_YEAR


def calculate_monthly_payment(
    property_price: float,
    deposit: float,
    annual_interest_rate: float,
    mortgage_term_in_years: float,
) -> float:
    """Fixed monthly payment that repays price - deposit over the term."""
    loan_amount = property_price - deposit
    r = _monthly_rate(annual_interest_rate)
    n = mortgage_term_in_years * MONTHS_PER_YEAR

    if r == 0:
        return _divide(loan_amount, n)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor = (1 + r) ** n
    except OverflowError:
        factor = math.inf
    return _divide(loan_amount * r * factor, factor - 1)


def calculate_capital(property_price: float, deposit: float) -> float:
    return property_price - deposit


def calculate_total_repayment(monthly_payment: float, mortgage_term_in_years: float) -> float:
    """Nominal total: every payment equal to monthly_payment for the full term."""
    return monthly_payment * mortgage_term_in_years * MONTHS_PER_YEAR


def calculate_interest(total_repayment: float, capital: float) -> float:
    return total_repayment - capital


def calculate_affordability_check(
    property_price: float,
    deposit: float,
    annual_interest_rate: float,
    mortgage_term_in_years: float,
) -> float:
    """Monthly payment with the rate stressed by STRESS_TEST_MARGIN points."""
    return calculate_monthly_payment(
        property_price,
        deposit,
        annual_interest_rate + STRESS_TEST_MARGIN,
        mortgage_term_in_years,
    )


def calculate_yearly_breakdown(
    property_price: float,
    deposit: float,
    annual_interest_rate: float,
    mortgage_term_in_years: float,
) -> list[YearlySnapshot]:
    """Remaining debt at the end of each whole year of the term.

    Simulates every monthly payment rather than using the closed-form
    balance, so the zero-rate case needs no special handling. A fractional
    term is truncated to whole years; a zero or negative term gives [].
    """
    balance = calculate_capital(property_price, deposit)
    pmt = calculate_monthly_payment(
        property_price, deposit, annual_interest_rate, mortgage_term_in_years
    )
    r = _monthly_rate(annual_interest_rate)

    yearly: list[YearlySnapshot] = []
    for year in range(1, math.floor(mortgage_term_in_years) + 1):
        for _ in range(MONTHS_PER_YEAR):
            interest = balance * r
            principal_paid = pmt - interest
            balance -= principal_paid

            # Floating-point overshoot on the final payments
            if balance < 0:
                balance = 0.0

        yearly.append(YearlySnapshot(year=year, remaining_debt=balance))

    return yearly


def calculate_mortgage(
    property_price: float,
    deposit: float,
    annual_interest_rate: float,
    mortgage_term_in_years: float,
) -> MortgageResult:
    """Run every calculation for one set of loan parameters.

    Total repayment is the nominal figure and is not reconciled with the
    simulated schedule.
    """
    pmt = calculate_monthly_payment(
        property_price, deposit, annual_interest_rate, mortgage_term_in_years
    )
    capital = calculate_capital(property_price, deposit)
    total_repayment = calculate_total_repayment(pmt, mortgage_term_in_years)

    return MortgageResult(
        monthly_payment=pmt,
        total_repayment=total_repayment,
        capital=capital,
        interest=calculate_interest(total_repayment, capital),
        affordability_check=calculate_affordability_check(
            property_price, deposit, annual_interest_rate, mortgage_term_in_years
        ),
        yearly_breakdown=calculate_yearly_breakdown(
            property_price, deposit, annual_interest_rate, mortgage_term_in_years
        ),
    )


def calculate_mortgage_for(params: LoanParameters) -> MortgageResult:
    """calculate_mortgage for a LoanParameters record."""
    return calculate_mortgage(
        params.property_price,
        params.deposit,
        params.annual_interest_rate,
        params.mortgage_term_in_years,
    )
