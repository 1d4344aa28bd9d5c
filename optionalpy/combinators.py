from __future__ import annotations
from typing import Any, Callable, Iterable, List, TypeVar

from .optional import ABSENT, Optional, Present, from_nullable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def sequence(optionals: Iterable[Optional[A]]) -> Optional[List[A]]:
    """All present: ``Present`` of the payloads in order. Stops at the first absent."""
    out: List[A] = []
    for o in optionals:
        if not o.has_value():
            return ABSENT
        out.append(o.value)  # type: ignore[attr-defined]
    return Present(out)


def traverse(items: Iterable[A], f: Callable[[A], Optional[B]]) -> Optional[List[B]]:
    # f is not called for items after the first absent result
    out: List[B] = []
    for x in items:
        o = f(x)
        if not o.has_value():
            return ABSENT
        out.append(o.value)  # type: ignore[attr-defined]
    return Present(out)


def map2(a: Optional[A], b: Optional[B], f: Callable[[A, B], C]) -> Optional[C]:
    if a.has_value() and b.has_value():
        return Present(f(a.value, b.value))  # type: ignore[attr-defined]
    return ABSENT


def first_present(*optionals: Any) -> Optional[Any]:
    for o in optionals:
        o = from_nullable(o)
        if o.has_value():
            return o
    return ABSENT


def collect_present(optionals: Iterable[Optional[A]]) -> List[A]:
    return [o.value for o in optionals if o.has_value()]  # type: ignore[attr-defined]


def flatten(nested: Optional[Optional[A]]) -> Optional[A]:
    return nested.bind(lambda inner: inner)
