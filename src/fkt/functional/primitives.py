"""Nullary and identity callbacks.

Ready-made callables for the places where a callback is required but nothing
interesting should happen: default arguments, event handlers, filter
predicates and test doubles. Using the shared module-level functions avoids
allocating a new ``lambda`` at every call site.

Examples:
    >>> from fkt.functional.primitives import noop, constant
    >>>
    >>> # Default callback instead of ``on_done or (lambda *a: None)``
    >>> options = {"retries": 3}
    >>> on_done = options.get("on_done") or noop
    >>> on_done("finished") is None
    True
    >>>
    >>> # Always answer the same thing
    >>> get_timeout = constant(30)
    >>> get_timeout("ignored", retries=3)
    30
"""

import typing as tp

__all__ = [
    "noop",
    "undefined",
    "identity",
    "true",
    "false",
    "constant",
]

T = tp.TypeVar("T")


def noop(*args: tp.Any, **kwargs: tp.Any) -> None:
    """Accept anything, do nothing and return ``None``."""


# Same object as ``noop``; reads better where "returns nothing" is the point
undefined = noop


def identity(x: T) -> T:
    """Return ``x`` itself."""
    return x


def true(*args: tp.Any, **kwargs: tp.Any) -> bool:
    """Always return ``True``."""
    return True


def false(*args: tp.Any, **kwargs: tp.Any) -> bool:
    """Always return ``False``.

    Handy as a handler that must veto something, e.g. a GUI event callback
    whose ``False`` return stops propagation.
    """
    return False


def constant(c: T) -> tp.Callable[..., T]:
    """Create a callable that always returns ``c``.

    Args:
        c: The value to return. It is captured as-is, not copied, so mutations
            made to it later are visible through the callable.

    Returns:
        A function accepting any arguments and returning ``c``.
    """

    def _constant(*args: tp.Any, **kwargs: tp.Any) -> T:
        return c

    return _constant
