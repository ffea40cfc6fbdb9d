"""Mini README: Entry point CLI for the marina boat manager.

This script exposes a Typer CLI taking exactly one argument, the inventory
file. The file is loaded into memory, the interactive command shell runs until
the operator exits, and the inventory is then written back to the same file.
A missing or unreadable file starts the session with an empty marina.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from marina.configuration import get_settings
from marina.exceptions import InventoryFileError
from marina.interface import MarinaShell
from marina.inventory import BoatInventory
from marina.logging_utils import configure_root_logger, get_logger
from marina.persistence import load_all

LOGGER = get_logger("boat_manager")

cli = typer.Typer(
    help="Manage the boats, locations and balances of a marina.",
    add_completion=False,
)


@cli.command()
def run(
    inventory_file: Path = typer.Argument(
        ..., metavar="BoatData.csv", help="Inventory file to load and save back on exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every inventory change."),
) -> None:
    """Load the inventory and start the interactive command shell."""

    settings = get_settings()
    configure_root_logger(logging.INFO if verbose else settings.log_level)

    inventory = BoatInventory(capacity=settings.max_boats)
    try:
        result = load_all(inventory_file)
    except InventoryFileError as error:
        LOGGER.warning("%s: %s", error, error.__cause__)
        typer.echo(f"Failed to open file: {error.__cause__ or error}", err=True)
    else:
        inventory.extend(result.boats)

    MarinaShell(inventory, inventory_file).run()


if __name__ == "__main__":
    cli()
