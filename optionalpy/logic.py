"""Three-valued (Kleene) logic over ``Optional[bool]``.

Absence does not always win here, unlike arithmetic lifting:

    AND    | True    False   absent
    -------|------------------------
    True   | True    False   absent
    False  | False   False   False
    absent | absent  False   absent

    OR     | True    False   absent
    -------|------------------------
    True   | True    True    True
    False  | True    False   absent
    absent | True    absent  absent

``False`` decides an AND and ``True`` decides an OR whatever the other side
holds. Both operations are commutative and associative.
"""
from __future__ import annotations
from typing import Any, Iterable

from .optional import ABSENT, Optional, Present, from_nullable

TRUE: Optional[bool] = Present(True)
FALSE: Optional[bool] = Present(False)


def is_logical(o: Optional[Any]) -> bool:
    """True for an absent optional or one holding a ``bool``."""
    return not o.has_value() or type(o.value) is bool  # type: ignore[attr-defined]


def _coerce(x: Any) -> Optional[bool]:
    o = from_nullable(x)
    if not is_logical(o):
        raise TypeError(f"expected an optional bool, got Present({o.value!r})")  # type: ignore[attr-defined]
    return o


def _holds(o: Optional[bool], b: bool) -> bool:
    return o.has_value() and o.value is b  # type: ignore[attr-defined]


def and_(a: Any, b: Any) -> Optional[bool]:
    a, b = _coerce(a), _coerce(b)
    if _holds(a, False) or _holds(b, False):
        return FALSE
    if a.is_absent() or b.is_absent():
        return ABSENT
    return TRUE


def or_(a: Any, b: Any) -> Optional[bool]:
    a, b = _coerce(a), _coerce(b)
    if _holds(a, True) or _holds(b, True):
        return TRUE
    if a.is_absent() or b.is_absent():
        return ABSENT
    return FALSE


def not_(a: Any) -> Optional[bool]:
    a = _coerce(a)
    if a.is_absent():
        return ABSENT
    return FALSE if a.value else TRUE  # type: ignore[attr-defined]


def all_(items: Iterable[Any]) -> Optional[bool]:
    """Fold with AND from ``TRUE``; stops at the first ``False``."""
    acc: Optional[bool] = TRUE
    for x in items:
        acc = and_(acc, x)
        if _holds(acc, False):
            break
    return acc


def any_(items: Iterable[Any]) -> Optional[bool]:
    """Fold with OR from ``FALSE``; stops at the first ``True``."""
    acc: Optional[bool] = FALSE
    for x in items:
        acc = or_(acc, x)
        if _holds(acc, True):
            break
    return acc
