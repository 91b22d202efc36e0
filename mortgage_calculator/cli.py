"""CLI for the mortgage calculator. Prints a repayment report.

Usage:
    python -m mortgage_calculator.cli 100000 5000 --term 15 --rate 5.25
    python -m mortgage_calculator.cli 300000 60000 --term 30   # latest Bank Rate
"""

import argparse
import asyncio
import logging
import math

from mortgage_calculator.config import settings
from mortgage_calculator.data.boe import BankOfEnglandClient
from mortgage_calculator.engine.repayment import calculate_mortgage_for
from mortgage_calculator.models.results import LoanParameters, MortgageResult


# ── Helpers ──────────────────────────────────────────────────────────────────

def _gbp(v) -> str:
    """Format an amount as pounds sterling, e.g. £1,234.56."""
    v = float(v)
    sign = "-" if v < 0 else ""
    return f"{sign}£{abs(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 48}")
    print(f"  {title}")
    print(f"{'=' * 48}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(params: LoanParameters, result: MortgageResult) -> None:
    _header("Results")
    print(f"  Interest Rate:        {params.annual_interest_rate:.2f}%")
    print(f"  Monthly Payment:      {_gbp(result.monthly_payment)}")
    print(f"  Total Repayment:      {_gbp(result.total_repayment)}")
    print(f"  Capital:              {_gbp(result.capital)}")
    print(f"  Interest:             {_gbp(result.interest)}")
    print(f"  Affordability Check:  {_gbp(result.affordability_check)}")


def print_breakdown(result: MortgageResult) -> None:
    _header("Yearly Breakdown")
    print(f"  {'Year':>4}  {'Remaining Debt':>16}")
    for snapshot in result.yearly_breakdown:
        print(f"  {snapshot.year:>4}  {_gbp(snapshot.remaining_debt):>16}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Repayment mortgage calculator")
    parser.add_argument("price", type=float, help="Property price")
    parser.add_argument("deposit", type=float, help="Deposit")
    parser.add_argument("--term", type=float, required=True, help="Mortgage term in years")
    parser.add_argument("--rate", type=float, default=None, help="Annual interest rate in percent (default: latest Bank Rate)")
    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    for name in ("price", "deposit", "term", "rate"):
        value = getattr(args, name)
        if value is not None and not math.isfinite(value):
            parser.error(f"{name} must be a finite number")
    if args.price <= 0:
        parser.error("price must be positive")
    if not 0 <= args.deposit <= args.price:
        parser.error("deposit must be between 0 and the property price")
    if not 0 < args.term <= settings.max_term_years:
        parser.error(f"--term must be between 0 and {settings.max_term_years} years")
    if args.rate is not None and args.rate < 0:
        parser.error("--rate cannot be negative")


async def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(parser, args)

    rate = args.rate
    if rate is None:
        rate = await BankOfEnglandClient().get_latest_rate()

    params = LoanParameters(
        property_price=args.price,
        deposit=args.deposit,
        annual_interest_rate=rate,
        mortgage_term_in_years=args.term,
    )
    result = calculate_mortgage_for(params)
    print_summary(params, result)
    print_breakdown(result)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
