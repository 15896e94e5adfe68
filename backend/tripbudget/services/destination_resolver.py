"""Destination and travel-style lookup against the static pricing tables."""

import logging

from tripbudget.data.destinations import DEFAULT_PROFILE, DESTINATION_PROFILES, DestinationProfile
from tripbudget.data.pricing import DEFAULT_STYLE, STYLE_MULTIPLIERS, StyleMultipliers

logger = logging.getLogger(__name__)

_STYLE_ALIASES = {"midrange": "mid-range", "mid": "mid-range"}


def normalize_destination(destination: str) -> str:
    return destination.strip().lower()


def resolve_destination(destination: str) -> DestinationProfile:
    """
    Look up the cost profile for a free-text destination.

    Exact key match first, then the first table entry (in table order) where
    either string contains the other, then the international default.
    Never raises for unknown destinations.
    """
    key = normalize_destination(destination)
    if not key:
        return DEFAULT_PROFILE

    profile = DESTINATION_PROFILES.get(key)
    if profile is not None:
        return profile

    for name, candidate in DESTINATION_PROFILES.items():
        if name in key or key in name:
            logger.debug(f"Destination '{destination}' matched '{name}'")
            return candidate

    logger.debug(f"Destination '{destination}' not in table, using default profile")
    return DEFAULT_PROFILE


def normalize_style(style: str) -> str:
    key = "-".join(style.strip().lower().replace("_", " ").split())
    return _STYLE_ALIASES.get(key, key)


def resolve_style(style: str) -> tuple[str, StyleMultipliers]:
    """Return (style key, multipliers), falling back to mid-range."""
    key = normalize_style(style)
    multipliers = STYLE_MULTIPLIERS.get(key)
    if multipliers is None:
        logger.debug(f"Unknown travel style '{style}', using {DEFAULT_STYLE}")
        return DEFAULT_STYLE, STYLE_MULTIPLIERS[DEFAULT_STYLE]
    return key, multipliers
