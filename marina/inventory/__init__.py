"""Mini README: Marina inventory package.

Groups the boat record types, the sorted in-memory ``BoatInventory`` and the
fixed-width row formatter used by the command shell.
"""

from .boat import (
    MONTHLY_RATES,
    Boat,
    LandLocation,
    Location,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from .display import format_boat, format_inventory
from .store import DEFAULT_CAPACITY, BoatInventory

__all__ = [
    "DEFAULT_CAPACITY",
    "MONTHLY_RATES",
    "Boat",
    "BoatInventory",
    "LandLocation",
    "Location",
    "LocationKind",
    "SlipLocation",
    "StorageLocation",
    "TrailerLocation",
    "format_boat",
    "format_inventory",
]
