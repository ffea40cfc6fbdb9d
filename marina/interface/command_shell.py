"""Mini README: Interactive command loop for the marina manager.

Structure:
    * MarinaShell - reads commands, calls the inventory and reports outcomes.

Commands are picked by their first letter, in any case:

    (I)nventory  list every boat
    (A)dd        add a boat from one ``name,length,kind,value,owed`` line
    (R)emove     remove a boat by name
    (P)ayment    take a payment against a boat's balance
    (M)onth      charge every boat its monthly fee
    e(X)it       save the inventory and leave

Input and output go through injectable callables so the loop can be driven
from tests without a terminal. Running out of input is treated as ``Exit``.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Union

import typer

from ..exceptions import (
    BoatNotFoundError,
    BoatParseError,
    CapacityExceededError,
    InventoryFileError,
    PaymentExceedsBalanceError,
)
from ..inventory import BoatInventory, format_inventory
from ..logging_utils import get_logger
from ..persistence import parse_line, save_all

LOGGER = get_logger(__name__)

WELCOME_BANNER = "Welcome to the Boat Management System\n-------------------------------------"
MENU_PROMPT = "\n(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
BOAT_LINE_PROMPT = "Please enter the boat data in CSV format                 : "
BOAT_NAME_PROMPT = "Please enter the boat name                               : "
AMOUNT_PROMPT = "Please enter the amount to be paid                       : "
FAREWELL = "\nExiting the Boat Management System"


class MarinaShell:
    """Drive a ``BoatInventory`` from line-oriented user input."""

    def __init__(
        self,
        inventory: BoatInventory,
        path: Union[str, Path],
        *,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = typer.echo,
    ) -> None:
        self.inventory = inventory
        self.path = Path(path)
        self._read_line = read_line
        self._write = write
        self._handlers = {
            "i": self.show_inventory,
            "a": self.add_boat,
            "r": self.remove_boat,
            "p": self.take_payment,
            "m": self.charge_month,
        }

    def run(self) -> None:
        """Loop over commands until ``Exit`` or end of input, then save."""

        self._write(WELCOME_BANNER)
        while True:
            try:
                command = self._read_line(MENU_PROMPT)
            except EOFError:
                break
            option = command[:1].lower()
            if option == "x":
                break
            handler = self._handlers.get(option)
            if handler is None:
                self._write(f"Invalid option {command[:1]}")
                continue
            try:
                handler()
            except EOFError:
                break
        self.exit()

    def show_inventory(self) -> None:
        listing = format_inventory(self.inventory.list_boats())
        if listing:
            self._write(listing)

    def add_boat(self) -> None:
        """Parse one CSV line and insert it."""

        if self.inventory.is_full:
            self._write("Marina is full.")
            return
        line = self._read_line(BOAT_LINE_PROMPT)
        try:
            boat = parse_line(line)
        except BoatParseError as error:
            LOGGER.info("Rejected boat data: %s", error)
            self._write("Invalid boat data format.")
            return
        try:
            self.inventory.insert(boat)
        except CapacityExceededError:
            self._write("Marina is full.")

    def remove_boat(self) -> None:
        name = self._read_line(BOAT_NAME_PROMPT)
        try:
            self.inventory.remove(name)
        except BoatNotFoundError:
            self._write("No boat with that name")

    def take_payment(self) -> None:
        """Ask for a boat, then an amount, and credit the payment."""

        name = self._read_line(BOAT_NAME_PROMPT)
        if self.inventory.find_index(name) is None:
            self._write("No boat with that name")
            return
        amount_text = self._read_line(AMOUNT_PROMPT)
        try:
            amount = float(amount_text)
            if not math.isfinite(amount):
                raise ValueError(amount_text)
        except ValueError:
            self._write("Invalid payment amount")
            return
        try:
            self.inventory.apply_payment(name, amount)
        except PaymentExceedsBalanceError as error:
            self._write(f"That is more than the amount owed, ${error.balance:.2f}")

    def charge_month(self) -> None:
        self.inventory.charge_monthly()

    def exit(self) -> None:
        """Save the inventory back to its file; failures are reported, not raised."""

        self._write(FAREWELL)
        try:
            save_all(self.path, self.inventory.list_boats())
        except InventoryFileError as error:
            LOGGER.error("%s: %s", error, error.__cause__)
            self._write(f"Failed to save file: {error}")
