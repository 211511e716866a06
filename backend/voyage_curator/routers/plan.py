"""Plan router: vacation plan generation and intake form options."""

import logging

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from voyage_curator.data.destinations import CLIMATE_LABELS, COMPANION_LABELS
from voyage_curator.data.form_options import (
    BUDGET_OPTIONS,
    CLIMATE_OPTIONS,
    COMPANION_OPTIONS,
    CUISINE_OPTIONS,
    DEFAULT_FORM_STATE,
    FORM_STEPS,
    INTEREST_OPTIONS,
    PACE_OPTIONS,
)
from voyage_curator.schemas.vacation import VacationRequest
from voyage_curator.services.planning.plan_generator import generate_vacation_plan

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATION_FAILED_MESSAGE = (
    "We were unable to generate a vacation plan. "
    "Please try again or adjust the information provided."
)


def flatten_errors(exc: ValidationError) -> dict:
    """Group validation messages by dotted field path; root-level ones go to formErrors."""
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        if path:
            field_errors.setdefault(path, []).append(error["msg"])
        else:
            form_errors.append(error["msg"])
    return {"formErrors": form_errors, "fieldErrors": field_errors}


@router.post("")
def create_plan(payload: dict = Body(...)):
    """Validate the intake form and return ranked destination recommendations."""
    try:
        request = VacationRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected plan request: {e.error_count()} validation errors")
        return JSONResponse(status_code=422, content={"ok": False, "errors": flatten_errors(e)})

    try:
        plan = generate_vacation_plan(request)
    except Exception:
        logger.exception("Failed to generate vacation plan")
        return JSONResponse(status_code=500, content={"ok": False, "message": GENERATION_FAILED_MESSAGE})

    return {"ok": True, "plan": plan.model_dump(mode="json", by_alias=True)}


@router.get("/options")
def get_form_options():
    """Option lists and defaults for the multi-step intake form."""
    return {
        "companions": COMPANION_OPTIONS,
        "budgets": BUDGET_OPTIONS,
        "paces": PACE_OPTIONS,
        "climates": CLIMATE_OPTIONS,
        "interests": INTEREST_OPTIONS,
        "cuisines": CUISINE_OPTIONS,
        "climateLabels": CLIMATE_LABELS,
        "companionLabels": COMPANION_LABELS,
        "steps": FORM_STEPS,
        "defaults": DEFAULT_FORM_STATE,
    }
