"""Static pricing tables — regional base fares, travel-style multipliers, daily rates.

Amounts are in whole currency units (see ``settings.currency``).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_REGION = "domestic"
DEFAULT_MODE = "flight"
DEFAULT_STYLE = "mid-range"

# Accommodation discount per head when travelling as a group
GROUP_DISCOUNT = 0.8

# Contingency on travel + stay + food + activities (local transport excluded)
CONTINGENCY_RATE = 0.15

# Largest party size and trip length an estimate is produced for
MAX_PEOPLE = 1000
MAX_DAYS = 365


@dataclass(frozen=True)
class DailyRates:
    """Per-person per-day base rates before destination and style scaling."""
    accommodation: int = 2500
    food: int = 1200
    activities: int = 800
    local_transport: int = 400


@dataclass(frozen=True)
class StyleMultipliers:
    """Scaling applied to stay, food and activities for a travel style."""
    accommodation: float
    food: float
    activities: float


DAILY_RATES = DailyRates()

STYLE_MULTIPLIERS: Mapping[str, StyleMultipliers] = MappingProxyType({
    "budget": StyleMultipliers(accommodation=0.6, food=0.7, activities=0.5),
    "mid-range": StyleMultipliers(accommodation=1.0, food=1.0, activities=1.0),
    "luxury": StyleMultipliers(accommodation=2.5, food=1.8, activities=2.0),
})


def _fares(flight: int, train: int, bus: int, car: int) -> Mapping[str, int]:
    return MappingProxyType({"flight": flight, "train": train, "bus": bus, "car": car})


# Round-trip fare per person, by region tier and travel mode
REGION_BASE_FARES: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "domestic": _fares(flight=8000, train=2500, bus=1500, car=4000),
    "south_asia": _fares(flight=15000, train=6000, bus=4000, car=10000),
    "southeast_asia": _fares(flight=25000, train=18000, bus=15000, car=22000),
    "east_asia": _fares(flight=40000, train=32000, bus=28000, car=36000),
    "middle_east": _fares(flight=30000, train=24000, bus=20000, car=26000),
    "europe": _fares(flight=60000, train=50000, bus=45000, car=55000),
    "americas": _fares(flight=80000, train=70000, bus=65000, car=75000),
    "africa": _fares(flight=50000, train=42000, bus=38000, car=45000),
    "oceania": _fares(flight=70000, train=60000, bus=55000, car=65000),
    "international": _fares(flight=45000, train=35000, bus=30000, car=40000),
})
