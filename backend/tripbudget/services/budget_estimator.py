"""Budget estimator — itemized trip cost breakdown from static pricing tables."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from tripbudget.config import settings
from tripbudget.data.pricing import (
    CONTINGENCY_RATE,
    DAILY_RATES,
    DEFAULT_MODE,
    DEFAULT_REGION,
    GROUP_DISCOUNT,
    REGION_BASE_FARES,
    DailyRates,
)
from tripbudget.schemas.budget import BudgetBreakdown, BudgetDetails, BudgetResponse, TripRequest
from tripbudget.services.destination_resolver import (
    normalize_destination,
    resolve_destination,
    resolve_style,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_factor(people: int) -> float:
    """Head count used for accommodation; groups share rooms at a discount."""
    if people > 1:
        return people * GROUP_DISCOUNT
    return people


def calculate_travel_cost(region: str, mode: str, people: int, multiplier: float) -> int:
    """
    Base fare for the region and mode, scaled by head count and destination.

    Unknown regions use the domestic fares; unknown modes use the flight fare.
    """
    fares = REGION_BASE_FARES.get(region)
    if fares is None:
        logger.debug(f"No fares for region '{region}', using {DEFAULT_REGION}")
        fares = REGION_BASE_FARES[DEFAULT_REGION]

    base_fare = fares.get(mode.strip().lower())
    if base_fare is None:
        logger.debug(f"Unknown travel mode '{mode}', using {DEFAULT_MODE} fare")
        base_fare = fares[DEFAULT_MODE]

    return round_half_up(base_fare * people * multiplier)


class BudgetEstimator:
    """Computes a budget breakdown for a validated trip request."""

    def __init__(self, rates: DailyRates = DAILY_RATES, currency: str | None = None):
        self.rates = rates
        self.currency = currency or settings.currency

    def estimate(self, trip: TripRequest) -> BudgetResponse:
        profile = resolve_destination(trip.destination)
        style_key, style = resolve_style(trip.travel_style)
        multiplier = profile.multiplier
        people, days = trip.people, trip.days

        travel = calculate_travel_cost(profile.region, trip.travel_mode, people, multiplier)
        stay = round_half_up(
            self.rates.accommodation * days * group_factor(people) * multiplier * style.accommodation
        )
        food = round_half_up(self.rates.food * days * people * multiplier * style.food)
        activities = round_half_up(
            self.rates.activities * days * people * multiplier * style.activities
        )
        local_transport = round_half_up(self.rates.local_transport * days * people * multiplier)
        # From the rounded lines, so the breakdown always adds up
        miscellaneous = round_half_up(CONTINGENCY_RATE * (travel + stay + food + activities))

        budget = BudgetBreakdown(
            travel=travel,
            stay=stay,
            food=food,
            activities=activities,
            local_transport=local_transport,
            miscellaneous=miscellaneous,
        )
        details = BudgetDetails(
            destination=normalize_destination(trip.destination),
            region=profile.region,
            cost_multiplier=multiplier,
            travel_style=style_key,
            travel_mode=trip.travel_mode.strip().lower(),
            people=people,
            days=days,
            currency=self.currency,
            total=budget.total,
        )
        return BudgetResponse(budget=budget, details=details)


budget_estimator = BudgetEstimator()
