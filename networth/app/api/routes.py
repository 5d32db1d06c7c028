"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from networth.core.health import get_health_status, get_ping_message
from networth.core.projection import (
    DEFAULT_ASSUMPTIONS,
    generate_projection,
    summarize_goal,
)
from networth.logging_utils import get_logger
from networth.schemas.health import HealthResponse, PingResponse
from networth.schemas.projection import (
    AssumptionsIn,
    GoalOut,
    ProjectionRequest,
    ProjectionResponse,
    YearRow,
)

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection payload errors=%d", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.get("/health")
def health() -> Any:
    response = HealthResponse.model_validate(get_health_status())
    return jsonify(response.model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Reference scenario the form starts from."""
    return jsonify(AssumptionsIn.from_assumptions(DEFAULT_ASSUMPTIONS).model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year net worth table plus the goal outcome."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        return jsonify({"detail": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST

    payload = ProjectionRequest.model_validate(raw_payload)
    assumptions = payload.assumptions.to_assumptions(percent_inputs=payload.percentInputs)

    rows = generate_projection(assumptions)
    summary = summarize_goal(rows, assumptions.goal_net_worth, base_year=payload.baseYear)
    logger.info(
        "projection computed age=%d goal_status=%s years_to_goal=%s",
        assumptions.current_age,
        summary.status.value,
        summary.year,
    )

    response = ProjectionResponse(
        rows=[YearRow.from_snapshot(row) for row in rows],
        goal=GoalOut.from_summary(summary),
    )
    return jsonify(response.model_dump())
