from __future__ import annotations

import logging
from typing import Any, Optional

from investcalc.core.projection import project
from investcalc.models import CalculatorForm
from investcalc.domain.report import build_report
from investcalc.schemas.projection import ProjectionReport

logger = logging.getLogger(__name__)


class Calculator:
    """
    Holds the current form and the last computed report.

    Nothing is recomputed implicitly: callers change inputs with update(),
    which recalculates, or call recalculate() directly.
    """

    def __init__(self, form: Optional[CalculatorForm] = None, max_years: Optional[int] = None):
        self.form = form or CalculatorForm()
        self.max_years = max_years
        self.report: Optional[ProjectionReport] = None

    def update(self, **changes: Any) -> ProjectionReport:
        # revalidate the merged values so coercion runs on the changed fields
        form = CalculatorForm.model_validate({**self.form.model_dump(), **changes})
        report = self._run(form)
        self.form = form
        self.report = report
        return report

    def recalculate(self) -> ProjectionReport:
        self.report = self._run(self.form)
        return self.report

    def _run(self, form: CalculatorForm) -> ProjectionReport:
        result = project(form.to_projection_input(), max_years=self.max_years)
        logger.debug("recalculated %d-year projection", form.time)
        return build_report(form.principal, form.periods_per_year, result)
