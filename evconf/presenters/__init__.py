"""
Output presenters for the evconf CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
