"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_calc.core.insights import build_report
from compound_calc.core.projection import project
from compound_calc.core.scenarios import compare_scenarios
from compound_calc.models import DEFAULT_PARAMETERS, InvestmentParameters, default_presets
from compound_calc.schemas.projection import ScenarioRequest

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected %s payload: %d error(s)", request.path, exc.error_count())
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": errors}), HTTPStatus.BAD_REQUEST


def _json_body() -> Any:
    # empty or unparseable bodies count as "all fields missing"
    payload = request.get_json(force=True, silent=True)
    return {} if payload is None else payload


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify({"status": "ok"})


@api_bp.get("/defaults")
def defaults() -> Any:
    """Starting values for the calculator form and the standard scenario presets."""
    return jsonify(
        {
            "parameters": DEFAULT_PARAMETERS.model_dump(),
            "presets": [preset.model_dump() for preset in default_presets()],
        }
    )


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year projection for one parameter set."""
    params = InvestmentParameters.model_validate(_json_body())
    result = project(params)
    current_app.logger.info(
        "projection: %s years, final value %.2f", params.years, result.finalValue
    )
    return jsonify(result.model_dump())


@api_bp.post("/scenarios")
def scenarios() -> Any:
    """Final totals for each preset return."""
    raw_payload: Dict[str, Any] = _json_body()
    payload = ScenarioRequest.model_validate(raw_payload)
    results = compare_scenarios(payload.parameters, payload.presets)
    return jsonify([result.model_dump() for result in results])


@api_bp.post("/report")
def report() -> Any:
    """Projection, scenarios and derived insights in one response."""
    payload = ScenarioRequest.model_validate(_json_body())
    result = build_report(
        payload.parameters,
        payload.presets,
        breakdown_rows=current_app.config["BREAKDOWN_ROWS"],
    )
    return jsonify(result.model_dump())
