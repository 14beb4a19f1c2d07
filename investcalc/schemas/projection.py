"""Data contracts returned to the calculator page."""

from typing import List, Literal

from pydantic import BaseModel, Field


class ScheduleRow(BaseModel):
    """Single row of the annual schedule table."""

    year: int = Field(..., ge=1)
    startPrincipal: float
    startBalance: float
    interest: float
    endBalance: float
    contribution: float = Field(..., description="Contributions paid during the year.")
    totalContributions: float


class Summary(BaseModel):
    endBalance: float
    startingAmount: float
    contributions: float
    totalInterest: float


class BreakdownSlice(BaseModel):
    name: Literal["Interest", "Principal", "Contributions"]
    value: float


class BalanceSeries(BaseModel):
    """Balance-over-time points, one per year including year 0."""

    years: List[int]
    balance: List[float]
    contributions: List[float]


class ProjectionReport(BaseModel):
    schedule: List[ScheduleRow]
    summary: Summary
    breakdown: List[BreakdownSlice]
    series: BalanceSeries


class FrequencyOption(BaseModel):
    name: str
    periodsPerYear: int = Field(..., ge=1)


class HealthResponse(BaseModel):
    status: str
    version: str
