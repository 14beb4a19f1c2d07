from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from investcalc.core.projection import ProjectionInput

logger = logging.getLogger(__name__)


class Frequency(str, Enum):
    ANNUALLY = "annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"


PERIODS_PER_YEAR: Dict[Frequency, int] = {
    Frequency.ANNUALLY: 1,
    Frequency.QUARTERLY: 4,
    Frequency.MONTHLY: 12,
    Frequency.WEEKLY: 52,
    Frequency.DAILY: 365,
}

_NON_NUMERIC = re.compile(r"[^0-9.]")


def periods_for(frequency: Union[str, Frequency]) -> int:
    """Map a frequency name to periods per year; unknown names fall back to 1."""
    try:
        key = Frequency(str(getattr(frequency, "value", frequency)).strip().lower())
    except ValueError:
        logger.warning("unknown contribution frequency %r, using annually", frequency)
        return PERIODS_PER_YEAR[Frequency.ANNUALLY]
    return PERIODS_PER_YEAR[key]


def parse_currency(value: Any) -> float:
    """
    Coerce a currency field to a float.

    Strings are stripped of everything but digits and '.', so "$12,500.50"
    becomes 12500.5. Anything that still doesn't parse becomes 0.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    cleaned = _NON_NUMERIC.sub("", str(value if value is not None else ""))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


class CalculatorForm(BaseModel):
    """Raw values from the calculator page. Defaults match the page's initial state."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    principal: float = Field(10000.0, ge=0)
    rate: float = 10.0
    time: int = 20
    contributionFrequency: str = Frequency.ANNUALLY.value
    additionalContributions: float = Field(0.0, ge=0)
    contributionGrowthRate: float = 3.14

    @field_validator("principal", "additionalContributions", mode="before")
    @classmethod
    def _currency(cls, value: Any) -> float:
        return parse_currency(value)

    @field_validator("contributionGrowthRate", mode="before")
    @classmethod
    def _growth_rate(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return 0.0
        return value

    @property
    def periods_per_year(self) -> int:
        return periods_for(self.contributionFrequency)

    def to_projection_input(self) -> ProjectionInput:
        return ProjectionInput(
            principal=self.principal,
            annual_rate_percent=self.rate,
            years=self.time,
            contributions_per_year=self.periods_per_year,
            annual_contribution=self.additionalContributions,
            contribution_growth_rate_percent=self.contributionGrowthRate,
        )
