"""Mini README: Fixed-width text rendering of inventory rows.

Each row shows the name, the length in whole feet, the location and the
balance, padded so rows line up in a terminal:

    Betty                 20'  slip     #3     Owes $ 100.00
"""

from __future__ import annotations

from typing import Iterable

from .boat import (
    Boat,
    LandLocation,
    Location,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)


def format_location(location: Location) -> str:
    """Render a location label and value in a fixed-width column."""

    if isinstance(location, SlipLocation):
        return f"slip     #{location.number:<3d}"
    if isinstance(location, LandLocation):
        return f"land      {location.bay:<3}"
    if isinstance(location, TrailerLocation):
        return f"trailor {location.license_tag:<8}"
    if isinstance(location, StorageLocation):
        return f"storage  #{location.number:<3d}"
    raise TypeError(f"Unsupported location: {location!r}")


def format_boat(boat: Boat) -> str:
    """Render one inventory row."""

    return (
        f"{boat.name:<20} {int(boat.length):3d}'  "
        f"{format_location(boat.location)}"
        f"   Owes ${boat.amount_owed:7.2f}"
    )


def format_inventory(boats: Iterable[Boat]) -> str:
    """Render rows for every boat, one per line, in the order given."""

    return "\n".join(format_boat(boat) for boat in boats)
