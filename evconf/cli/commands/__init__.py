"""
Click command implementations for the evconf CLI.

Each module implements one command; COMMANDS is registered with the main
group by evconf.cli.register_commands().
"""

from .check import check
from .diff import diff
from .get import get
from .show import show

COMMANDS = [
    check,
    diff,
    get,
    show,
]

__all__ = [
    "COMMANDS",
    "check",
    "diff",
    "get",
    "show",
]
