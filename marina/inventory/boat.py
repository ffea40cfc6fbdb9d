"""Mini README: Boat records and their storage locations.

Structure:
    * LocationKind - enum of location kinds, valued by their on-file tags.
    * SlipLocation / LandLocation / TrailerLocation / StorageLocation -
      one dataclass per kind carrying only that kind's data.
    * Boat - dataclass holding name, length, location and balance.

Monthly rates are charged per foot of boat length and depend only on the
location kind. The trailer kind is tagged ``trailor`` in inventory files and
that spelling is kept for compatibility with existing data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Union


class LocationKind(str, Enum):
    """Enumerate where a boat can be kept."""

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_str(cls, value: str) -> "LocationKind":
        """Resolve an on-file tag; tags are matched exactly."""

        try:
            return cls(value)
        except ValueError as error:
            raise ValueError(f"Unsupported location kind: {value}") from error


MONTHLY_RATES: Dict[LocationKind, float] = {
    LocationKind.SLIP: 12.5,
    LocationKind.LAND: 14.0,
    LocationKind.TRAILER: 25.0,
    LocationKind.STORAGE: 11.2,
}


@dataclass(frozen=True, slots=True)
class SlipLocation:
    """Boat moored in a numbered slip."""

    kind: ClassVar[LocationKind] = LocationKind.SLIP
    number: int

    @property
    def value(self) -> str:
        return str(self.number)


@dataclass(frozen=True, slots=True)
class LandLocation:
    """Boat kept on land in a lettered bay."""

    kind: ClassVar[LocationKind] = LocationKind.LAND
    bay: str

    @property
    def value(self) -> str:
        return self.bay


@dataclass(frozen=True, slots=True)
class TrailerLocation:
    """Boat kept on a trailer identified by its license tag."""

    kind: ClassVar[LocationKind] = LocationKind.TRAILER
    license_tag: str

    @property
    def value(self) -> str:
        return self.license_tag


@dataclass(frozen=True, slots=True)
class StorageLocation:
    """Boat kept in a numbered storage unit."""

    kind: ClassVar[LocationKind] = LocationKind.STORAGE
    number: int

    @property
    def value(self) -> str:
        return str(self.number)


Location = Union[SlipLocation, LandLocation, TrailerLocation, StorageLocation]


@dataclass(slots=True)
class Boat:
    """A boat in the marina and what its owner currently owes."""

    name: str
    length: float
    location: Location
    amount_owed: float = 0.0

    @property
    def monthly_rate(self) -> float:
        """Per-foot monthly rate for this boat's location kind."""

        return MONTHLY_RATES[self.location.kind]

    def monthly_charge(self) -> float:
        """Amount added to the balance by one monthly billing run."""

        return self.length * self.monthly_rate
