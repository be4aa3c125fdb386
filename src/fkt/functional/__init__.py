"""Functional primitives for fkt.

This package provides the callback helpers themselves: stateless placeholder
callables in :mod:`fkt.functional.primitives` and the higher-order wrappers in
:mod:`fkt.functional.adapters`. Every factory returns a fresh closure, so
helpers built from the same inputs never share state.
"""

from fkt.functional.primitives import noop, undefined, identity, true, false, constant
from fkt.functional.adapters import negate, narrow, bare, catch, attempt, safe

__all__ = [
    "noop",
    "undefined",
    "identity",
    "true",
    "false",
    "constant",
    "negate",
    "narrow",
    "bare",
    "catch",
    "attempt",
    "safe",
]
