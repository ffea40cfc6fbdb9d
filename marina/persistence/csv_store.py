"""Mini README: Plain-text persistence for the marina inventory.

Structure:
    * parse_line / serialize_line - convert between one boat and one line.
    * read_boats - parse an iterable of lines, skipping malformed ones.
    * load_all / save_all - file level load and save.
    * LoadResult - parsed boats plus the line numbers that were skipped.

File format, one boat per line, no header and no quoting::

    name,length,location_kind,location_value,amount_owed
    Betty,20,slip,3,100.00
    Sea Breeze,32,trailor,XK-4471,0.00

Lengths are written in whole feet (fractions are truncated) and balances with
two decimals. Loading is lenient: malformed lines are skipped and reported
through ``LoadResult.skipped_lines`` instead of failing the whole file,
including lines whose bytes are not valid UTF-8.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import BoatParseError, InventoryFileError
from ..inventory.boat import (
    Boat,
    LandLocation,
    Location,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

FIELD_COUNT = 5
MAX_NAME_LENGTH = 127
MAX_KIND_LENGTH = 15
MAX_VALUE_LENGTH = 31

PathLike = Union[str, Path]


@dataclass(slots=True)
class LoadResult:
    """Boats parsed from a file and the 1-based numbers of skipped lines."""

    boats: List[Boat] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_lines)


def _parse_number(line: str, text: str, label: str) -> float:
    try:
        number = float(text)
    except ValueError as error:
        raise BoatParseError(line, f"{label} '{text}' is not a number") from error
    if not math.isfinite(number):
        raise BoatParseError(line, f"{label} '{text}' is not a finite number")
    return number


def _parse_location(line: str, kind_text: str, value: str) -> Location:
    try:
        kind = LocationKind.from_str(kind_text)
    except ValueError as error:
        raise BoatParseError(line, str(error)) from error

    if kind is LocationKind.LAND:
        return LandLocation(bay=value[0])
    if kind is LocationKind.TRAILER:
        return TrailerLocation(license_tag=value)
    try:
        number = int(value)
    except ValueError as error:
        raise BoatParseError(line, f"{kind.value} number '{value}' is not an integer") from error
    if kind is LocationKind.SLIP:
        return SlipLocation(number=number)
    return StorageLocation(number=number)


def parse_line(line: str) -> Boat:
    """Parse one ``name,length,kind,value,owed`` line into a boat."""

    text = line.rstrip("\r\n")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as error:
        raise BoatParseError(line, "line is not valid UTF-8") from error
    fields = text.split(",")
    if len(fields) != FIELD_COUNT:
        raise BoatParseError(line, f"expected {FIELD_COUNT} fields, found {len(fields)}")
    name, length_text, kind_text, value, owed_text = fields

    for label, content, limit in (
        ("name", name, MAX_NAME_LENGTH),
        ("location kind", kind_text, MAX_KIND_LENGTH),
        ("location value", value, MAX_VALUE_LENGTH),
    ):
        if not content:
            raise BoatParseError(line, f"{label} is empty")
        if len(content) > limit:
            raise BoatParseError(line, f"{label} is longer than {limit} characters")

    length = _parse_number(line, length_text, "length")
    location = _parse_location(line, kind_text, value)
    amount_owed = _parse_number(line, owed_text, "amount owed")
    return Boat(name=name, length=length, location=location, amount_owed=amount_owed)


def serialize_line(boat: Boat) -> str:
    """Render a boat as one line, without the trailing newline."""

    return ",".join(
        (
            boat.name,
            str(int(boat.length)),
            boat.location.kind.value,
            boat.location.value,
            f"{boat.amount_owed:.2f}",
        )
    )


def read_boats(lines: Iterable[str]) -> LoadResult:
    """Parse lines into boats, skipping and recording malformed lines."""

    result = LoadResult()
    for line_number, line in enumerate(lines, start=1):
        try:
            result.boats.append(parse_line(line))
        except BoatParseError as error:
            result.skipped_lines.append(line_number)
            LOGGER.warning("Skipping line %s: %s", line_number, error.reason)
    return result


def load_all(path: PathLike) -> LoadResult:
    """Load every well-formed boat from an inventory file."""

    source = Path(path)
    try:
        with source.open("r", encoding="utf-8", errors="surrogateescape") as handle:
            result = read_boats(handle)
    except OSError as error:
        raise InventoryFileError(source, "read") from error
    LOGGER.debug(
        "Loaded %s boats from %s (%s lines skipped)",
        len(result.boats),
        source,
        result.skipped_count,
    )
    return result


def save_all(path: PathLike, boats: Iterable[Boat]) -> int:
    """Overwrite ``path`` with one line per boat and return the count written."""

    destination = Path(path)
    written = 0
    try:
        with destination.open("w", encoding="utf-8") as handle:
            for boat in boats:
                handle.write(serialize_line(boat) + "\n")
                written += 1
    except OSError as error:
        raise InventoryFileError(destination, "write") from error
    LOGGER.debug("Saved %s boats to %s", written, destination)
    return written
