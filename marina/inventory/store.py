"""Mini README: In-memory marina inventory.

Structure:
    * DEFAULT_CAPACITY - reference marina size used when no policy is given.
    * BoatInventory - sorted collection of boats with lookup, billing and
      payment operations.

Boats are kept ordered by name, compared case-insensitively, and the order is
re-established after every insert with a stable sort so boats sharing a name
keep their insertion order. Every name-based operation goes through
``find_index`` and therefore acts on the first match in that order.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from ..exceptions import BoatNotFoundError, CapacityExceededError, PaymentExceedsBalanceError
from ..logging_utils import get_logger
from .boat import Boat

LOGGER = get_logger(__name__)

DEFAULT_CAPACITY = 120


def _sort_key(boat: Boat) -> str:
    return boat.name.casefold()


def _to_cents(value: float) -> float:
    """Round a currency value to whole cents."""

    return round(value, 2)


class BoatInventory:
    """Manage the marina's boats, their balances and monthly billing."""

    def __init__(
        self,
        boats: Optional[Iterable[Boat]] = None,
        *,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if capacity < 1:
            raise ValueError("Capacity must be at least one boat.")
        self._capacity = capacity
        self._boats: List[Boat] = []
        if boats:
            rejected = self.extend(boats)
            if rejected:
                raise CapacityExceededError(capacity)
        LOGGER.debug("Boat inventory initialised with %s boats", len(self._boats))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(list(self._boats))

    def _sort(self) -> None:
        self._boats.sort(key=_sort_key)

    def insert(self, boat: Boat) -> None:
        """Add a boat, keeping the inventory sorted by name."""

        if self.is_full:
            raise CapacityExceededError(self._capacity)
        self._boats.append(boat)
        self._sort()
        LOGGER.info("Added boat '%s' (%s boats in inventory)", boat.name, len(self._boats))

    def extend(self, boats: Iterable[Boat]) -> List[Boat]:
        """Bulk insert boats, returning those that did not fit."""

        rejected: List[Boat] = []
        for boat in boats:
            if self.is_full:
                rejected.append(boat)
            else:
                self._boats.append(boat)
        self._sort()
        if rejected:
            LOGGER.warning(
                "Inventory capacity of %s reached; %s boats were not added",
                self.capacity,
                len(rejected),
            )
        return rejected

    def find_index(self, name: str) -> Optional[int]:
        """Return the position of the first boat matching ``name``, ignoring case."""

        wanted = name.casefold()
        for index, boat in enumerate(self._boats):
            if boat.name.casefold() == wanted:
                return index
        return None

    def get(self, name: str) -> Boat:
        """Retrieve a boat by name, raising informative errors when missing."""

        index = self.find_index(name)
        if index is None:
            raise BoatNotFoundError(name)
        return self._boats[index]

    def remove(self, name: str) -> Boat:
        """Remove and return the boat matching ``name``."""

        index = self.find_index(name)
        if index is None:
            raise BoatNotFoundError(name)
        removed = self._boats.pop(index)
        LOGGER.info("Removed boat '%s'", removed.name)
        return removed

    def apply_payment(self, name: str, amount: float) -> Boat:
        """Credit a payment against a boat's balance.

        Amounts are compared in whole cents. Payments larger than the amount
        owed are rejected in full; the balance is never clamped or partially
        credited.
        """

        boat = self.get(name)
        payment = _to_cents(amount)
        balance = _to_cents(boat.amount_owed)
        if payment > balance:
            raise PaymentExceedsBalanceError(boat.name, amount, balance)
        boat.amount_owed = _to_cents(balance - payment)
        LOGGER.info(
            "Applied payment of %.2f to '%s'; %.2f still owed",
            amount,
            boat.name,
            boat.amount_owed,
        )
        return boat

    def charge_monthly(self) -> float:
        """Bill every boat for one month and return the total charged."""

        total = 0.0
        for boat in self._boats:
            charge = boat.monthly_charge()
            boat.amount_owed = _to_cents(boat.amount_owed + charge)
            total += charge
        LOGGER.info("Charged monthly fees of %.2f across %s boats", total, len(self._boats))
        return total

    def list_boats(self) -> List[Boat]:
        """Return boats ordered by name for display."""

        return list(self._boats)
