import pytest

from tripbudget.data.destinations import DEFAULT_PROFILE, DESTINATION_PROFILES, REGIONS
from tripbudget.data.pricing import STYLE_MULTIPLIERS
from tripbudget.services.destination_resolver import (
    normalize_style,
    resolve_destination,
    resolve_style,
)


def test_exact_match_ignores_case_and_whitespace():
    assert resolve_destination("  GOA ") == DESTINATION_PROFILES["goa"]


def test_key_contained_in_input():
    assert resolve_destination("North Goa beaches") == DESTINATION_PROFILES["goa"]


def test_input_contained_in_key():
    assert resolve_destination("Lanka") == DESTINATION_PROFILES["sri lanka"]


@pytest.mark.parametrize("destination", ["goa and kerala", "kerala and goa"])
def test_ambiguous_input_takes_first_entry_in_table_order(destination):
    # Both keys match; goa is listed before kerala
    assert resolve_destination(destination) is DESTINATION_PROFILES["goa"]


@pytest.mark.parametrize("destination", ["Atlantis", "xyzzy", "", "   "])
def test_unknown_or_blank_destination_uses_default(destination):
    assert resolve_destination(destination) == DEFAULT_PROFILE
    assert DEFAULT_PROFILE.multiplier == 1.5
    assert DEFAULT_PROFILE.region == "international"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DESTINATION_PROFILES["atlantis"] = DEFAULT_PROFILE


def test_every_profile_uses_a_known_region():
    for name, profile in DESTINATION_PROFILES.items():
        assert name == name.strip().lower()
        assert profile.region in REGIONS
        assert profile.multiplier > 0


@pytest.mark.parametrize(
    "style, expected",
    [
        ("Budget", "budget"),
        ("Mid-range", "mid-range"),
        ("mid range", "mid-range"),
        ("MID_RANGE", "mid-range"),
        ("midrange", "mid-range"),
        (" Luxury ", "luxury"),
    ],
)
def test_style_normalization(style, expected):
    assert normalize_style(style) == expected


def test_unknown_style_falls_back_to_mid_range():
    key, multipliers = resolve_style("backpacker deluxe")
    assert key == "mid-range"
    assert multipliers == STYLE_MULTIPLIERS["mid-range"]
