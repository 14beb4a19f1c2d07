from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Hard bounds on the amount of work a single projection may do.
MAX_YEARS = 1000
MAX_PERIODS_PER_YEAR = 10000

_CENT = Decimal("0.01")
# wide enough to quantize any finite double to cents
_CENTS_CONTEXT = Context(prec=400)


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class ProjectionInput(BaseModel):
    """Numeric inputs for one projection. Percentages are plain numbers (10 means 10%)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float
    annual_rate_percent: float
    years: int
    contributions_per_year: int = 1
    annual_contribution: float = 0.0
    contribution_growth_rate_percent: float = 0.0


class YearlyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    start_principal: float
    end_balance: float
    interest_earned: float
    period_contribution: float
    cumulative_contributions: float


class Totals(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_interest: float
    total_contributions: float
    ending_balance: float
    # opening principal with the first year's contribution taken back out
    starting_amount: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: List[YearlyRecord]
    totals: Totals


def round2(value: float) -> float:
    """Round to cents, half away from zero, on the exact binary value."""
    if not math.isfinite(value):
        return value
    magnitude = Decimal(abs(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_CENTS_CONTEXT)
    return math.copysign(float(magnitude), value) if magnitude else 0.0


def _check_inputs(inputs: ProjectionInput, max_years: int) -> List[str]:
    errors: List[str] = []

    for name in (
        "principal",
        "annual_rate_percent",
        "annual_contribution",
        "contribution_growth_rate_percent",
    ):
        if not math.isfinite(getattr(inputs, name)):
            errors.append(f"{name} must be a finite number")

    if inputs.years < 1:
        errors.append("years must be at least 1")
    elif inputs.years > max_years:
        errors.append(f"years must be at most {max_years}")

    if inputs.contributions_per_year < 1:
        errors.append("contributions_per_year must be at least 1")
    elif inputs.contributions_per_year > MAX_PERIODS_PER_YEAR:
        errors.append(f"contributions_per_year must be at most {MAX_PERIODS_PER_YEAR}")

    return errors


def project(inputs: ProjectionInput, max_years: Optional[int] = None) -> ProjectionResult:
    """
    Simulate the account year by year.

    Per year:
      1) Fold this year's per-period contribution into the running start principal.
      2) For each sub-period, accrue interest on (balance + contribution), then add
         both the interest and the contribution to the balance.
      3) Record the year, rounding only the recorded snapshot to cents.
      4) Add the remaining (periods - 1) contributions to the start principal and
         grow the contribution for next year.

    Raises InvalidInputError before producing anything if the inputs are out of
    range or the projection overflows.
    """
    limit = MAX_YEARS if max_years is None else min(max_years, MAX_YEARS)
    errors = _check_inputs(inputs, limit)
    if errors:
        raise InvalidInputError(errors)

    periods = inputs.contributions_per_year
    period_rate = (inputs.annual_rate_percent / 100) / periods
    growth = 1 + inputs.contribution_growth_rate_percent / 100

    current_balance = float(inputs.principal)
    period_contribution = float(inputs.annual_contribution)
    cumulative_contrib = 0.0
    start_principal = float(inputs.principal)

    records: List[YearlyRecord] = []
    for year in range(1, inputs.years + 1):
        start_principal += period_contribution
        year_interest = 0.0

        for _ in range(periods):
            interest = (current_balance + period_contribution) * period_rate
            year_interest += interest
            current_balance += interest + period_contribution
            cumulative_contrib += period_contribution

        snapshot = (
            start_principal,
            current_balance,
            year_interest,
            period_contribution,
            cumulative_contrib,
        )
        if not all(math.isfinite(value) for value in snapshot):
            raise InvalidInputError([f"projection overflowed in year {year}"])

        records.append(
            YearlyRecord(
                year=year,
                start_principal=round2(start_principal),
                end_balance=round2(current_balance),
                interest_earned=round2(year_interest),
                period_contribution=round2(period_contribution),
                cumulative_contributions=round2(cumulative_contrib),
            )
        )

        start_principal += period_contribution * (periods - 1)
        period_contribution *= growth

    total_interest = sum(record.interest_earned for record in records)
    if not math.isfinite(total_interest):
        raise InvalidInputError(["projection overflowed summing interest"])

    first, last = records[0], records[-1]
    totals = Totals(
        total_interest=round2(total_interest),
        total_contributions=last.cumulative_contributions,
        ending_balance=last.end_balance,
        starting_amount=round2(first.start_principal - first.period_contribution),
    )

    logger.debug(
        "projected %d years x %d periods: ending balance %.2f",
        inputs.years,
        periods,
        totals.ending_balance,
    )
    return ProjectionResult(records=records, totals=totals)


__all__ = [
    "MAX_YEARS",
    "MAX_PERIODS_PER_YEAR",
    "InvalidInputError",
    "ProjectionInput",
    "YearlyRecord",
    "Totals",
    "ProjectionResult",
    "round2",
    "project",
]
