"""Core types and settings shared by the callback helpers."""

from fkt.core.types import UNDEFINED, Undefined, Outcome, NonNegativeInt, bind_scope
from fkt.core.config import Settings, settings

__all__ = [
    "UNDEFINED",
    "Undefined",
    "Outcome",
    "NonNegativeInt",
    "bind_scope",
    "Settings",
    "settings",
]
