"""Reusable type definitions for the fkt package.

This module holds the small set of values and constrained types shared by the
callback helpers.

Types:
    Undefined: Type of the ``UNDEFINED`` marker returned by ``catch`` when the
        wrapped callable raised.
    Outcome: Explicit success/failure result returned by ``attempt``.
    NonNegativeInt: Integer constrained to be ``>= 0`` (argument counts).
"""

import types
from typing import Annotated, Any, Callable, ClassVar, Optional

import annotated_types as at
from pydantic import BaseModel, ConfigDict, model_validator

__all__ = [
    "Undefined",
    "UNDEFINED",
    "Outcome",
    "NonNegativeInt",
    "bind_scope",
]

# Number of leading positional arguments kept by ``narrow``
NonNegativeInt = Annotated[int, at.Ge(0)]


class Undefined:
    """Marker for "the wrapped call raised".

    There is exactly one instance, ``UNDEFINED``. It is falsy and distinct from
    ``None`` so it cannot be confused with a callable that legitimately returned
    nothing.
    """

    _instance: ClassVar[Optional["Undefined"]] = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "Undefined":
        return self


UNDEFINED = Undefined()


class Outcome(BaseModel):
    """Result of a call made through ``attempt``.

    Exactly one of ``value`` or ``error`` is meaningful: a failed outcome always
    carries the raised exception, a successful one never does.

    Attributes:
        value: The wrapped callable's return value on success.
        error: The exception raised by the wrapped callable on failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    error: Optional[BaseException] = None

    @model_validator(mode="after")
    def check_single_channel(self) -> "Outcome":
        if self.error is not None and self.value is not None:
            raise ValueError("A failed outcome cannot carry a value")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Outcome":
        return cls(error=error)

    def unwrap(self) -> Any:
        """Return the value, or re-raise the captured exception."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.ok else default


def bind_scope(fn: Callable[..., Any], scope: Any = None) -> Callable[..., Any]:
    """Bind ``fn`` to ``scope`` so the scope arrives as its first argument.

    Args:
        fn: The callable to bind.
        scope: Receiver object. ``None`` leaves ``fn`` untouched.

    Returns:
        ``fn`` itself when no scope is given, otherwise a bound method.
    """
    if scope is None:
        return fn
    return types.MethodType(fn, scope)
