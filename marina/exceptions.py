"""Exceptions raised by the marina inventory and its persistence layer."""

from __future__ import annotations

from typing import Optional


class MarinaError(Exception):
    """Base exception for marina errors."""


class BoatNotFoundError(MarinaError, LookupError):
    """Raised when no boat matches a name lookup."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No boat named '{name}'")
        self.name = name


class CapacityExceededError(MarinaError):
    """Raised when inserting into a full inventory."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Marina is full ({capacity} boats)")
        self.capacity = capacity


class PaymentExceedsBalanceError(MarinaError, ValueError):
    """Raised when a payment is larger than the amount owed."""

    def __init__(self, name: str, amount: float, balance: float) -> None:
        super().__init__(
            f"Payment of ${amount:.2f} for '{name}' exceeds the amount owed, ${balance:.2f}"
        )
        self.name = name
        self.amount = amount
        self.balance = balance


class BoatParseError(MarinaError, ValueError):
    """Raised when a CSV line cannot be turned into a boat."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None) -> None:
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid boat data{location}: {reason}")
        self.line = line
        self.reason = reason
        self.line_number = line_number


class InventoryFileError(MarinaError):
    """Raised when the inventory file cannot be read or written."""

    def __init__(self, path: object, action: str) -> None:
        super().__init__(f"Failed to {action} inventory file {path}")
        self.path = path
        self.action = action
