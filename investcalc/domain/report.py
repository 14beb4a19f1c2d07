from __future__ import annotations

from typing import List

from investcalc.core.projection import ProjectionResult, YearlyRecord, round2
from investcalc.schemas.projection import (
    BalanceSeries,
    BreakdownSlice,
    ProjectionReport,
    ScheduleRow,
    Summary,
)


def schedule_row(record: YearlyRecord, periods_per_year: int) -> ScheduleRow:
    # start balance backs out the year's interest and the contributions added
    # on top of the one already folded into start_principal
    start_balance = (
        record.end_balance
        - record.interest_earned
        - record.period_contribution * (periods_per_year - 1)
    )
    return ScheduleRow(
        year=record.year,
        startPrincipal=record.start_principal,
        startBalance=round2(start_balance),
        interest=record.interest_earned,
        endBalance=record.end_balance,
        contribution=round2(record.period_contribution * periods_per_year),
        totalContributions=record.cumulative_contributions,
    )


def balance_series(records: List[YearlyRecord]) -> BalanceSeries:
    opening = records[0].start_principal
    return BalanceSeries(
        years=list(range(len(records) + 1)),
        balance=[opening] + [record.end_balance for record in records],
        contributions=[opening]
        + [
            round2(record.cumulative_contributions + opening - record.period_contribution)
            for record in records
        ],
    )


def build_report(principal: float, periods_per_year: int, result: ProjectionResult) -> ProjectionReport:
    """
    Shape an engine result into what the page renders: the annual schedule,
    the results summary, the principal/contributions/interest breakdown and
    the balance-over-time series.
    """
    totals = result.totals
    return ProjectionReport(
        schedule=[schedule_row(record, periods_per_year) for record in result.records],
        summary=Summary(
            endBalance=totals.ending_balance,
            startingAmount=totals.starting_amount,
            contributions=totals.total_contributions,
            totalInterest=totals.total_interest,
        ),
        breakdown=[
            BreakdownSlice(name="Interest", value=totals.total_interest),
            BreakdownSlice(name="Principal", value=round2(principal)),
            BreakdownSlice(name="Contributions", value=totals.total_contributions),
        ],
        series=balance_series(result.records),
    )
