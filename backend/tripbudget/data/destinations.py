"""Destination cost profiles — cost multiplier and region tier per destination."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

REGIONS: tuple[str, ...] = (
    "domestic",
    "south_asia",
    "southeast_asia",
    "east_asia",
    "middle_east",
    "europe",
    "americas",
    "africa",
    "oceania",
    "international",
)


@dataclass(frozen=True)
class DestinationProfile:
    """How expensive a destination is relative to a typical domestic trip."""
    multiplier: float
    region: str


DEFAULT_PROFILE = DestinationProfile(multiplier=1.5, region="international")


def _profile(multiplier: float, region: str) -> DestinationProfile:
    return DestinationProfile(multiplier=multiplier, region=region)


# Keys are lower-case. Insertion order is the scan order for partial matches,
# so "goa and kerala" and "kerala and goa" both resolve to goa.
DESTINATION_PROFILES: Mapping[str, DestinationProfile] = MappingProxyType({
    # India — beaches and hills
    "goa": _profile(1.0, "domestic"),
    "kerala": _profile(1.0, "domestic"),
    "manali": _profile(0.9, "domestic"),
    "shimla": _profile(0.9, "domestic"),
    "rishikesh": _profile(0.8, "domestic"),
    "darjeeling": _profile(0.9, "domestic"),
    "ooty": _profile(0.9, "domestic"),
    "ladakh": _profile(1.3, "domestic"),
    "kashmir": _profile(1.2, "domestic"),
    "andaman": _profile(1.4, "domestic"),
    # India — cities and heritage
    "mumbai": _profile(1.3, "domestic"),
    "delhi": _profile(1.1, "domestic"),
    "bangalore": _profile(1.2, "domestic"),
    "chennai": _profile(1.0, "domestic"),
    "kolkata": _profile(0.9, "domestic"),
    "hyderabad": _profile(1.0, "domestic"),
    "jaipur": _profile(0.9, "domestic"),
    "udaipur": _profile(1.1, "domestic"),
    "agra": _profile(0.9, "domestic"),
    "varanasi": _profile(0.8, "domestic"),
    # South Asia
    "nepal": _profile(0.8, "south_asia"),
    "kathmandu": _profile(0.8, "south_asia"),
    "bhutan": _profile(1.2, "south_asia"),
    "sri lanka": _profile(0.9, "south_asia"),
    "maldives": _profile(2.5, "south_asia"),
    "bangladesh": _profile(0.7, "south_asia"),
    # Southeast Asia
    "thailand": _profile(1.2, "southeast_asia"),
    "bangkok": _profile(1.2, "southeast_asia"),
    "phuket": _profile(1.3, "southeast_asia"),
    "bali": _profile(1.3, "southeast_asia"),
    "indonesia": _profile(1.2, "southeast_asia"),
    "vietnam": _profile(1.0, "southeast_asia"),
    "malaysia": _profile(1.3, "southeast_asia"),
    "singapore": _profile(2.0, "southeast_asia"),
    "philippines": _profile(1.1, "southeast_asia"),
    "cambodia": _profile(0.9, "southeast_asia"),
    # East Asia
    "japan": _profile(2.4, "east_asia"),
    "tokyo": _profile(2.6, "east_asia"),
    "south korea": _profile(2.1, "east_asia"),
    "seoul": _profile(2.1, "east_asia"),
    "china": _profile(1.8, "east_asia"),
    "hong kong": _profile(2.3, "east_asia"),
    "taiwan": _profile(1.8, "east_asia"),
    # Middle East
    "dubai": _profile(2.2, "middle_east"),
    "abu dhabi": _profile(2.1, "middle_east"),
    "qatar": _profile(2.0, "middle_east"),
    "turkey": _profile(1.6, "middle_east"),
    "istanbul": _profile(1.7, "middle_east"),
    "jordan": _profile(1.6, "middle_east"),
    # Europe
    "paris": _profile(3.0, "europe"),
    "france": _profile(2.8, "europe"),
    "london": _profile(3.2, "europe"),
    "united kingdom": _profile(3.0, "europe"),
    "switzerland": _profile(3.5, "europe"),
    "italy": _profile(2.7, "europe"),
    "rome": _profile(2.7, "europe"),
    "spain": _profile(2.5, "europe"),
    "germany": _profile(2.7, "europe"),
    "amsterdam": _profile(2.9, "europe"),
    "greece": _profile(2.3, "europe"),
    "iceland": _profile(3.4, "europe"),
    "europe": _profile(2.8, "europe"),
    # Americas
    "new york": _profile(3.5, "americas"),
    "usa": _profile(3.2, "americas"),
    "united states": _profile(3.2, "americas"),
    "canada": _profile(3.0, "americas"),
    "mexico": _profile(1.8, "americas"),
    "brazil": _profile(2.0, "americas"),
    "peru": _profile(1.7, "americas"),
    # Africa
    "kenya": _profile(1.8, "africa"),
    "tanzania": _profile(1.9, "africa"),
    "south africa": _profile(2.0, "africa"),
    "egypt": _profile(1.5, "africa"),
    "morocco": _profile(1.6, "africa"),
    "mauritius": _profile(2.2, "africa"),
    # Oceania
    "australia": _profile(3.0, "oceania"),
    "sydney": _profile(3.1, "oceania"),
    "new zealand": _profile(3.0, "oceania"),
    "fiji": _profile(2.4, "oceania"),
})
