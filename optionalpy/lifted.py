"""Operators lifted from ``T`` to ``Optional[T]``.

Arithmetic and bitwise operators yield ``ABSENT`` when either operand is
absent and otherwise apply the native operator to the payloads. Ordering
comparisons yield a plain ``bool`` and are ``False`` when either operand is
absent. Raw operands go through ``from_nullable`` first, so ``None`` counts as
absent and ``present(3) + 4`` works.

``and_``, ``or_`` and ``invert`` switch to three-valued logic (see
``optionalpy.logic``) when every present operand holds a ``bool``.
"""
from __future__ import annotations
import operator
from typing import Any, Callable, TypeVar

from .optional import ABSENT, Optional, Present, from_nullable
from . import logic

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def lift_unary(op: Callable[[A], B]) -> Callable[[Any], Optional[B]]:
    def lifted(a: Any) -> Optional[B]:
        a = from_nullable(a)
        if a.has_value():
            return Present(op(a.value))  # type: ignore[attr-defined]
        return ABSENT
    lifted.__name__ = f"lifted_{getattr(op, '__name__', 'op')}"
    return lifted


def lift_binary(op: Callable[[A, B], C]) -> Callable[[Any, Any], Optional[C]]:
    def lifted(a: Any, b: Any) -> Optional[C]:
        a, b = from_nullable(a), from_nullable(b)
        if a.has_value() and b.has_value():
            return Present(op(a.value, b.value))  # type: ignore[attr-defined]
        return ABSENT
    lifted.__name__ = f"lifted_{getattr(op, '__name__', 'op')}"
    return lifted


def lift_compare(op: Callable[[A, B], bool]) -> Callable[[Any, Any], bool]:
    def lifted(a: Any, b: Any) -> bool:
        a, b = from_nullable(a), from_nullable(b)
        if a.has_value() and b.has_value():
            return op(a.value, b.value)  # type: ignore[attr-defined]
        return False
    lifted.__name__ = f"lifted_{getattr(op, '__name__', 'op')}"
    return lifted


def lift(f: Callable[..., C]) -> Callable[..., Optional[C]]:
    """Lift an n-ary function: absent if any argument is absent."""
    def lifted(*args: Any) -> Optional[C]:
        opts = [from_nullable(a) for a in args]
        if all(o.has_value() for o in opts):
            return Present(f(*[o.value for o in opts]))  # type: ignore[attr-defined]
        return ABSENT
    lifted.__name__ = f"lifted_{getattr(f, '__name__', 'fn')}"
    return lifted


add = lift_binary(operator.add)
sub = lift_binary(operator.sub)
mul = lift_binary(operator.mul)
truediv = lift_binary(operator.truediv)
floordiv = lift_binary(operator.floordiv)
mod = lift_binary(operator.mod)
pow_ = lift_binary(operator.pow)
pow_mod = lift(pow)
lshift = lift_binary(operator.lshift)
rshift = lift_binary(operator.rshift)
xor = lift_binary(operator.xor)

lt = lift_compare(operator.lt)
le = lift_compare(operator.le)
gt = lift_compare(operator.gt)
ge = lift_compare(operator.ge)

neg = lift_unary(operator.neg)
pos = lift_unary(operator.pos)
abs_ = lift_unary(operator.abs)

_bit_and = lift_binary(operator.and_)
_bit_or = lift_binary(operator.or_)
_bit_invert = lift_unary(operator.invert)


def and_(a: Any, b: Any) -> Optional[Any]:
    a, b = from_nullable(a), from_nullable(b)
    if logic.is_logical(a) and logic.is_logical(b):
        return logic.and_(a, b)
    return _bit_and(a, b)


def or_(a: Any, b: Any) -> Optional[Any]:
    a, b = from_nullable(a), from_nullable(b)
    if logic.is_logical(a) and logic.is_logical(b):
        return logic.or_(a, b)
    return _bit_or(a, b)


def invert(a: Any) -> Optional[Any]:
    a = from_nullable(a)
    if logic.is_logical(a):
        return logic.not_(a)
    return _bit_invert(a)
