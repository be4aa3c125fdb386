"""Small set of named callback helpers.

    >>> import fkt
    >>> options = {}
    >>> callback = options.get("callback") or fkt.noop
    >>> numbers = [1, 2, 3, 4]
    >>> list(filter(fkt.negate(lambda n: n % 2), numbers))
    [2, 4]
"""

from fkt.core.types import UNDEFINED, Undefined, Outcome
from fkt.functional import (
    noop,
    undefined,
    identity,
    true,
    false,
    constant,
    negate,
    narrow,
    bare,
    catch,
    attempt,
    safe,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Undefined",
    "Outcome",
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
