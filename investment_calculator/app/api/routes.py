"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from investment_calculator import __version__
from investment_calculator.core.projection import (
    InvalidInputError,
    compound_interest,
    project,
)
from investment_calculator.core.report import build_report
from investment_calculator.schemas.ping import PingResponse
from investment_calculator.schemas.projection import (
    CompoundInterestRequest,
    CompoundInterestResponse,
    InputParameters,
    ReportResponse,
)
from investment_calculator.utils.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    """Out-of-range input is a user-facing message, not a server failure."""
    logger.warning("rejected projection input: %s", exc)
    return jsonify({"detail": [exc.to_dict()]}), HTTPStatus.BAD_REQUEST


def _parse_input() -> InputParameters:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return InputParameters.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Return the year-by-year projection table."""
    rows = project(_parse_input())
    return jsonify([row.model_dump() for row in rows])


@api_bp.post("/report")
def report() -> Any:
    """Return the projection together with summary, chart and breakdown data."""
    rows = project(_parse_input())
    response = ReportResponse(results=rows, report=build_report(rows))
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest_query() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompoundInterestRequest.model_validate(raw_payload)
    interest = compound_interest(payload.principal, payload.rate, payload.years)
    response = CompoundInterestResponse(**payload.model_dump(), interest=interest)
    return jsonify(response.model_dump())
