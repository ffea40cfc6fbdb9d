"""Mini README: Tests for the interactive command loop.

The shell is driven with scripted answers and a list capturing its output, so
each test reads like a short operator session.
"""

from __future__ import annotations

from typing import Iterable, List

import pytest

from marina.interface import MarinaShell
from marina.inventory import Boat, BoatInventory, SlipLocation, StorageLocation, TrailerLocation
from marina.persistence import load_all


class ScriptedSession:
    """Feed prepared answers to the shell and record what it writes."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)


def _run(inventory: BoatInventory, path, answers: Iterable[str]) -> ScriptedSession:
    session = ScriptedSession(answers)
    MarinaShell(inventory, path, read_line=session.read_line, write=session.write).run()
    return session


@pytest.fixture
def betty_inventory() -> BoatInventory:
    return BoatInventory([Boat("Betty", 20.0, SlipLocation(3), 100.0)])


def test_add_then_exit_saves_sorted_inventory(tmp_path, betty_inventory) -> None:
    inventory_file = tmp_path / "BoatData.csv"

    session = _run(betty_inventory, inventory_file, ["A", "alpha,12,trailor,TAG9,0.00", "x"])

    assert session.output[0].startswith("Welcome to the Boat Management System")
    assert inventory_file.read_text(encoding="utf-8") == (
        "alpha,12,trailor,TAG9,0.00\nBetty,20,slip,3,100.00\n"
    )


def test_invalid_boat_line_is_reported(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "out.csv", ["a", "not,enough", "x"])

    assert "Invalid boat data format." in session.output
    assert len(betty_inventory) == 1


def test_add_into_full_marina_is_reported(tmp_path) -> None:
    inventory = BoatInventory([Boat("Betty", 20.0, SlipLocation(3), 100.0)], capacity=1)

    session = _run(inventory, tmp_path / "out.csv", ["a", "x"])

    assert "Marina is full." in session.output
    assert len(inventory) == 1


def test_remove_unknown_boat_is_reported(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "out.csv", ["r", "Ghost", "r", "BETTY", "x"])

    assert session.output.count("No boat with that name") == 1
    assert len(betty_inventory) == 0


def test_payment_rejects_overpayment_then_accepts_exact_amount(tmp_path, betty_inventory) -> None:
    session = _run(
        betty_inventory,
        tmp_path / "out.csv",
        ["p", "Betty", "150", "p", "betty", "100", "x"],
    )

    assert "That is more than the amount owed, $100.00" in session.output
    assert betty_inventory.get("Betty").amount_owed == 0.0


def test_payment_for_unknown_boat_skips_amount_prompt(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "out.csv", ["p", "Ghost", "x"])

    assert "No boat with that name" in session.output
    assert not any("amount to be paid" in prompt for prompt in session.prompts)


def test_payment_with_non_numeric_amount_is_reported(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "out.csv", ["p", "Betty", "lots", "x"])

    assert "Invalid payment amount" in session.output
    assert betty_inventory.get("Betty").amount_owed == pytest.approx(100.0)


def test_month_and_inventory_commands(tmp_path) -> None:
    inventory = BoatInventory([Boat("Towed", 10.0, TrailerLocation("XK-4471"), 0.0)])

    session = _run(inventory, tmp_path / "out.csv", ["M", "i", "x"])

    assert any("Owes $ 250.00" in text for text in session.output)


def test_unknown_option_is_reported(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "out.csv", ["q", "", "x"])

    assert "Invalid option q" in session.output
    assert "Invalid option " in session.output


def test_end_of_input_saves_like_exit(tmp_path, betty_inventory) -> None:
    inventory_file = tmp_path / "BoatData.csv"

    session = _run(betty_inventory, inventory_file, ["m"])

    assert "\nExiting the Boat Management System" in session.output
    assert load_all(inventory_file).boats[0].amount_owed == pytest.approx(350.0)


def test_save_failure_is_reported_not_raised(tmp_path, betty_inventory) -> None:
    session = _run(betty_inventory, tmp_path / "missing" / "out.csv", ["x"])

    assert any(text.startswith("Failed to save file") for text in session.output)


def test_paying_listed_balance_after_month_clears_it(tmp_path) -> None:
    inventory = BoatInventory([Boat("Stowed", 3.0, StorageLocation(1), 0.0)])

    session = _run(inventory, tmp_path / "out.csv", ["m", "i", "p", "Stowed", "33.60", "x"])

    assert any("Owes $  33.60" in text for text in session.output)
    assert not any(text.startswith("That is more") for text in session.output)
    assert inventory.get("Stowed").amount_owed == 0.0
