"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from investcalc import __version__
from investcalc.core.projection import InvalidInputError, project
from investcalc.domain.report import build_report
from investcalc.models import PERIODS_PER_YEAR, CalculatorForm
from investcalc.schemas.projection import FrequencyOption, HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected calculator form: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    logger.warning("rejected projection input: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """Contribution frequencies the form can select from."""
    options = [
        FrequencyOption(name=frequency.value, periodsPerYear=periods)
        for frequency, periods in PERIODS_PER_YEAR.items()
    ]
    return jsonify([option.model_dump() for option in options])


@api_bp.route("/projection", methods=["POST", "OPTIONS"])
def projection() -> Any:
    """Recalculate the schedule, summary, breakdown and series for a form."""
    if request.method == "OPTIONS":
        return current_app.make_response(("", HTTPStatus.NO_CONTENT))

    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": ["request body must be a JSON object"]}), HTTPStatus.BAD_REQUEST

    form = CalculatorForm.model_validate(payload)
    logger.info(
        "projection: %d years, %s contributions",
        form.time,
        form.contributionFrequency,
    )
    result = project(form.to_projection_input(), max_years=current_app.config["MAX_YEARS"])
    report = build_report(form.principal, form.periods_per_year, result)
    return jsonify(report.model_dump()), HTTPStatus.OK
