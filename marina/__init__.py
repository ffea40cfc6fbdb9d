"""Mini README: Core package initializer for the marina boat manager.

The package keeps a sorted, in-memory inventory of marina boats
(``marina.inventory``), reads and writes it as plain comma-separated lines
(``marina.persistence``) and drives it from an interactive command loop
(``marina.interface``).
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
