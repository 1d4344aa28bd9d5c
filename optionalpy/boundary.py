"""Adapters from raw, possibly-missing sources into ``Optional``.

Each adapter hands its raw result to ``from_nullable``, so the active
``BoundaryConfig`` decides what counts as absent everywhere.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, Optional as _Maybe, Tuple, Type, TypeVar

from .config import get_config
from .optional import ABSENT, Optional, from_nullable

A = TypeVar("A")


def lookup(container: Any, key: Any) -> Optional[Any]:
    """``container[key]``, absent on a missing key or index (or a ``None`` value)."""
    try:
        raw = container[key]
    except (KeyError, IndexError):
        return ABSENT
    return from_nullable(raw)


def first(items: Iterable[A], pred: _Maybe[Callable[[A], bool]] = None) -> Optional[A]:
    """First present item (matching ``pred`` if given); absent-like items are skipped."""
    for x in items:
        o = from_nullable(x)
        if o.has_value() and (pred is None or pred(x)):
            return o
    return ABSENT


def getattr_(obj: Any, name: str) -> Optional[Any]:
    return from_nullable(getattr(obj, name, None))


def parse_int(text: Any, base: int = 10) -> Optional[int]:
    """Parse ``str``/``bytes`` in ``base``. An ``int`` passes through and an
    integral ``float`` converts; anything lossy (``3.9``, ``True``) is absent."""
    try:
        if isinstance(text, (str, bytes)):
            raw = int(text, base)
        elif type(text) is int:
            raw = text
        elif type(text) is float and text.is_integer():
            raw = int(text)
        else:
            return ABSENT
    except (TypeError, ValueError, OverflowError):
        return ABSENT
    return from_nullable(raw)


def parse_float(text: Any) -> Optional[float]:
    if text is None:
        return ABSENT
    try:
        return from_nullable(float(text))
    except (TypeError, ValueError, OverflowError):
        return ABSENT


def attempt(fn: Callable[..., A], *args: Any, exceptions: Tuple[Type[BaseException], ...] = (Exception,), **kwargs: Any) -> Optional[A]:
    """Call ``fn``; one of ``exceptions`` becomes ``ABSENT``, anything else propagates."""
    try:
        raw = fn(*args, **kwargs)
    except exceptions as ex:
        get_config().logger.debug("attempt mapped exception to absent", fn=getattr(fn, "__name__", repr(fn)), error=type(ex).__name__)
        return ABSENT
    return from_nullable(raw)
