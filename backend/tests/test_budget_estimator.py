import pytest

from tripbudget.data.destinations import DESTINATION_PROFILES
from tripbudget.data.pricing import REGION_BASE_FARES
from tripbudget.schemas.budget import TripRequest
from tripbudget.services.budget_estimator import (
    BudgetEstimator,
    budget_estimator,
    calculate_travel_cost,
    group_factor,
    round_half_up,
)


def _trip(**overrides) -> TripRequest:
    fields = {
        "destination": "Goa",
        "travel_style": "Budget",
        "travel_mode": "flight",
        "people": 2,
        "days": 3,
    }
    fields.update(overrides)
    return TripRequest(**fields)


def test_goa_budget_example():
    budget = budget_estimator.estimate(_trip()).budget

    assert budget.travel == 16000
    assert budget.stay == 7200
    assert budget.food == 5040
    assert budget.activities == 2400
    assert budget.local_transport == 2400
    assert budget.miscellaneous == 4596


def test_breakdown_serializes_under_display_names():
    dumped = budget_estimator.estimate(_trip()).budget.model_dump(by_alias=True)
    assert dumped == {
        "Travel": 16000,
        "Stay": 7200,
        "Food": 5040,
        "Activities": 2400,
        "LocalTransport": 2400,
        "Miscellaneous": 4596,
    }


def test_details_echo_normalized_inputs():
    details = BudgetEstimator(currency="INR").estimate(_trip(destination="  Goa ")).details

    assert details.destination == "goa"
    assert details.region == "domestic"
    assert details.cost_multiplier == 1.0
    assert details.travel_style == "budget"
    assert details.travel_mode == "flight"
    assert details.currency == "INR"
    assert details.total == 16000 + 7200 + 5040 + 2400 + 2400 + 4596


@pytest.mark.parametrize("people, expected", [(1, 1), (2, 1.6), (3, 2.4), (10, 8.0)])
def test_group_factor(people, expected):
    assert group_factor(people) == pytest.approx(expected)


def test_solo_traveller_pays_full_accommodation():
    budget = budget_estimator.estimate(_trip(people=1, travel_style="Mid-range", days=2)).budget
    assert budget.stay == 2500 * 2


def test_unknown_mode_uses_flight_fare():
    assert calculate_travel_cost("europe", "hovercraft", 1, 1.0) == REGION_BASE_FARES["europe"]["flight"]


def test_unknown_region_uses_domestic_fares():
    assert calculate_travel_cost("atlantis", "train", 2, 1.0) == 2 * REGION_BASE_FARES["domestic"]["train"]


def test_travel_mode_is_case_insensitive():
    assert calculate_travel_cost("domestic", " Train ", 1, 1.0) == 2500


def test_unknown_style_matches_mid_range():
    unknown = budget_estimator.estimate(_trip(travel_style="glamping")).budget
    mid = budget_estimator.estimate(_trip(travel_style="mid-range")).budget
    assert unknown == mid


def test_unknown_destination_uses_international_profile():
    result = budget_estimator.estimate(_trip(destination="Atlantis", people=1, days=1))
    assert result.details.region == "international"
    assert result.budget.travel == round_half_up(45000 * 1.5)


def test_miscellaneous_excludes_local_transport():
    budget = budget_estimator.estimate(_trip(destination="Paris", travel_style="luxury")).budget
    expected = round_half_up(0.15 * (budget.travel + budget.stay + budget.food + budget.activities))
    assert budget.miscellaneous == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (7200.000000000001, 7200), (4595.5, 4596), (0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("destination", list(DESTINATION_PROFILES)[::7] + ["Atlantis"])
@pytest.mark.parametrize("style", ["budget", "mid-range", "luxury"])
@pytest.mark.parametrize("mode", ["flight", "train", "bus", "car"])
def test_every_line_is_a_non_negative_integer(destination, style, mode):
    result = budget_estimator.estimate(
        _trip(destination=destination, travel_style=style, travel_mode=mode, people=3, days=5)
    )
    for amount in result.budget.model_dump().values():
        assert isinstance(amount, int)
        assert amount >= 0


def test_estimate_is_idempotent():
    trip = _trip(destination="Bali", travel_style="luxury", people=4, days=7)
    assert budget_estimator.estimate(trip) == budget_estimator.estimate(trip)
