"""Mini README: User-facing interfaces for the marina manager.

Currently exposes the interactive ``MarinaShell`` used by the CLI.
"""

from .command_shell import MarinaShell

__all__ = ["MarinaShell"]
