"""Budget router — trip budget estimation."""

import logging

from fastapi import APIRouter

from tripbudget.exceptions import BudgetEstimationError, TripRequestValidationError
from tripbudget.schemas.budget import (
    BudgetRequest,
    BudgetResponse,
    ServerErrorResponse,
    ValidationErrorResponse,
)
from tripbudget.services.budget_estimator import budget_estimator
from tripbudget.services.request_validator import validate_trip_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/estimate-budget",
    response_model=BudgetResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ServerErrorResponse}},
)
async def estimate_budget(req: BudgetRequest | None = None):
    """Estimate an itemized budget for a trip."""
    try:
        trip = validate_trip_request(req.received() if req else {})
        result = budget_estimator.estimate(trip)
    except TripRequestValidationError as e:
        logger.warning(f"Rejected budget request ({e.message}): {', '.join(e.fields)}")
        raise
    except Exception as e:
        logger.exception("Budget estimation failed")
        raise BudgetEstimationError(str(e)) from e

    logger.info(
        f"Budget calculated for {trip.people} people to {trip.destination} for {trip.days} days"
    )
    return result
