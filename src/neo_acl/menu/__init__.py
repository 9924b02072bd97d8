"""Navigation menu filtered by effective permissions."""

from .entities import MenuItem
from .filter import filter_menu, MenuRegistry

__all__ = ["MenuItem", "filter_menu", "MenuRegistry"]
