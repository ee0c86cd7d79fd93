"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request

from compound_calc import __version__
from compound_calc.core.frequency import Frequency
from compound_calc.core.projection import run_stepper
from compound_calc.core.summary import non_empty_records, summarize, year_end_records
from compound_calc.domain.errors import ConfigurationError
from compound_calc.domain.projection import coerce_config, prepare_projection
from compound_calc.schemas.health import PingResponse
from compound_calc.schemas.projection import ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@api_bp.errorhandler(ConfigurationError)
def _handle_configuration_error(exc: ConfigurationError):
    """Convert rejected configurations into JSON responses."""
    logger.warning("rejected projection configuration: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Project an investment and return its period-by-period records.

    Query flags ``yearEndOnly`` and ``skipEmptyRows`` narrow the returned
    records; the summary always covers the full run.
    """
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise ConfigurationError(["request body must be a JSON object"])

    config = coerce_config(raw_payload)
    plan = prepare_projection(config)
    records = run_stepper(config, plan)
    summary = summarize(records, config, plan)

    if request.args.get("skipEmptyRows", default=False, type=_flag):
        records = non_empty_records(records)
    if request.args.get("yearEndOnly", default=False, type=_flag):
        records = year_end_records(records)

    response = ProjectionResponse(
        algorithm=plan.algorithm.value,
        periodLabel=Frequency.parse(config.compoundInterval).period_label,
        summary=summary,
        records=records,
    )
    return jsonify(response.model_dump())
