"""Mini README: Inventory file persistence.

The ``csv_store`` module reads and writes the five-field boat line format used
both for the inventory file and for boats typed in at the ``Add`` prompt.
"""

from .csv_store import LoadResult, load_all, parse_line, read_boats, save_all, serialize_line

__all__ = ["LoadResult", "load_all", "parse_line", "read_boats", "save_all", "serialize_line"]
