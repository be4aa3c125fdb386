"""Callback adapters.

Higher-order helpers that wrap a callable to change how it is called or how it
fails, without touching what it does:

    - **negate**: invert a predicate, e.g. for ``filter``.
    - **narrow** / **bare**: drop surplus arguments before forwarding, for
      callbacks that are handed more arguments than they accept.
    - **catch**: turn any exception into the ``UNDEFINED`` marker.
    - **attempt**: turn the call into an explicit ``Outcome``.
    - **safe**: force the error slot of a completion callback
      ``callback(error, *results)`` to ``None``.

Every adapter accepts an optional ``scope``. When given, the wrapped callable
is bound to it and receives it as its first argument (its ``self``). Without a
scope, arguments are forwarded untouched, so an adapter stored as a class
attribute still receives its instance like any other method.

Only ``catch``, ``attempt`` and ``safe`` interfere with failures. The other
adapters let exceptions from the wrapped callable propagate unchanged.

Examples:
    >>> from fkt.functional.adapters import negate, narrow
    >>>
    >>> list(filter(negate(str.isdigit), ["1", "a", "2", "b"]))
    ['a', 'b']
    >>>
    >>> # ``int`` would treat the second argument as a base
    >>> list(map(narrow(1, int), ["10", "11"], [2, 2]))
    [10, 11]
"""

import functools
import typing as tp

from pydantic import TypeAdapter

from fkt.core import config
from fkt.core.types import UNDEFINED, NonNegativeInt, Outcome, bind_scope
from fkt.logger.logger import logger

__all__ = [
    "negate",
    "narrow",
    "bare",
    "catch",
    "attempt",
    "safe",
]

_argument_count = TypeAdapter(NonNegativeInt)


def negate(fn: tp.Callable[..., tp.Any], scope: tp.Any = None) -> tp.Callable[..., bool]:
    """Wrap a predicate so that it returns the negation of its result.

    Args:
        fn: The predicate to negate.
        scope: Optional receiver ``fn`` is bound to.

    Returns:
        A function returning ``not fn(*args, **kwargs)``.
    """
    target = bind_scope(fn, scope)

    @functools.wraps(fn)
    def _negated(*args: tp.Any, **kwargs: tp.Any) -> bool:
        return not target(*args, **kwargs)

    return _negated


def narrow(
    n: int, fn: tp.Callable[..., tp.Any], scope: tp.Any = None
) -> tp.Callable[..., tp.Any]:
    """Wrap ``fn`` so that it only ever sees its first ``n`` positional arguments.

    Surplus positional arguments and all keyword arguments are dropped. If the
    wrapper is called with fewer than ``n`` arguments, whatever is available is
    forwarded.

    Args:
        n: Number of leading positional arguments to keep.
        fn: The callable to wrap.
        scope: Optional receiver ``fn`` is bound to.

    Returns:
        A function returning ``fn(*args[:n])``.

    Raises:
        pydantic.ValidationError: If ``n`` is not a non-negative integer.
    """
    n = _argument_count.validate_python(n, strict=True)
    target = bind_scope(fn, scope)

    @functools.wraps(fn)
    def _narrowed(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        return target(*args[:n])

    return _narrowed


def bare(fn: tp.Callable[..., tp.Any], scope: tp.Any = None) -> tp.Callable[..., None]:
    """Call ``fn`` with its first argument only and discard its result.

    Useful for passing a one-argument function as a callback that is invoked
    with extra arguments, when the caller does not care about the return value.
    """
    narrowed = narrow(1, fn, scope)

    @functools.wraps(fn)
    def _bare(*args: tp.Any, **kwargs: tp.Any) -> None:
        narrowed(*args)

    return _bare


def catch(fn: tp.Callable[..., tp.Any], scope: tp.Any = None) -> tp.Callable[..., tp.Any]:
    """Wrap ``fn`` so that it never raises.

    Any ``Exception`` raised by ``fn`` is swallowed silently and the wrapper
    returns ``UNDEFINED`` instead. ``KeyboardInterrupt`` and ``SystemExit`` are
    not intercepted. Use :func:`attempt` when the caller needs to know what went
    wrong.

    Args:
        fn: The callable to wrap.
        scope: Optional receiver ``fn`` is bound to.

    Returns:
        A function returning ``fn``'s result, or ``UNDEFINED`` if it raised.
    """
    target = bind_scope(fn, scope)

    @functools.wraps(fn)
    def _caught(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        try:
            return target(*args, **kwargs)
        except Exception:
            return UNDEFINED

    return _caught


def attempt(fn: tp.Callable[..., tp.Any], scope: tp.Any = None) -> tp.Callable[..., Outcome]:
    """Wrap ``fn`` so that every call returns an :class:`Outcome`.

    Args:
        fn: The callable to wrap.
        scope: Optional receiver ``fn`` is bound to.

    Returns:
        A function returning ``Outcome.success(result)`` or
        ``Outcome.failure(exc)``.
    """
    target = bind_scope(fn, scope)

    @functools.wraps(fn)
    def _attempted(*args: tp.Any, **kwargs: tp.Any) -> Outcome:
        try:
            result = target(*args, **kwargs)
        except Exception as exc:
            return Outcome.failure(exc)
        return Outcome.success(result)

    return _attempted


def safe(fn: tp.Callable[..., tp.Any], scope: tp.Any = None) -> tp.Callable[..., tp.Any]:
    """Mask the error reported by a completion-callback style function.

    ``fn`` must follow the ``fn(*args, callback)`` convention where
    ``callback(error, *results)`` is eventually called, possibly later from an
    event loop. The wrapper keeps that convention but the original callback is
    always called with ``None`` as its error, followed by whatever results
    ``fn`` reported. A failing ``fn`` that reports no results therefore reaches
    the callback as ``callback(None)``.

    This hides real failures. Reach for it only where an error genuinely means
    "no result" to the caller. Setting ``FKT_LOG_MASKED_ERRORS`` logs every
    masked error as a warning on the ``fkt`` logger.

    Args:
        fn: The callable to wrap. It receives an interceptor in place of the
            caller's callback.
        scope: Optional receiver ``fn`` is bound to.

    Returns:
        A function with the same calling convention as ``fn``.

    Raises:
        TypeError: When the wrapper is called without a trailing callable.
    """
    target = bind_scope(fn, scope)
    name = getattr(fn, "__qualname__", repr(fn))

    @functools.wraps(fn)
    def _safe(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        if not args or not callable(args[-1]):
            raise TypeError(f"{name}() expects a trailing completion callback")
        *forwarded, callback = args

        def _intercept(error: tp.Any = None, *results: tp.Any) -> tp.Any:
            if error is not None and config.settings.LOG_MASKED_ERRORS:
                logger.warning(f"Masked error reported by {name}: {error!r}")
            return callback(None, *results)

        return target(*forwarded, _intercept, **kwargs)

    return _safe
