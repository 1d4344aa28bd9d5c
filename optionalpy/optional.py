from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, NoReturn, Optional as _Maybe, Tuple, TypeVar, Union

from .config import get_config
from .errors import EmptyValueAccess
from .logger import ConsoleLogger

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _binary(name: str, reflected: bool = False):
    def method(self, other):
        from . import lifted
        op = getattr(lifted, name)
        return op(other, self) if reflected else op(self, other)
    method.__name__ = f"__{'r' if reflected else ''}{name.rstrip('_')}__"
    return method


def _unary(name: str):
    def method(self):
        from . import lifted
        return getattr(lifted, name)(self)
    method.__name__ = f"__{name.rstrip('_')}__"
    return method


class Optional(Generic[T]):
    """A value that is either present (``Present(v)``) or absent (``ABSENT``).

    The variant is an explicit tag: ``Present(None)`` and ``Present(0)`` are both
    present, and nothing about the payload can make an instance look absent.

    Equality is structural. Two absent values are equal, two present values are
    equal when their payloads are, and a present value never equals an absent
    one. Comparing against anything that is not an ``Optional`` is ``False``.

    Arithmetic operators lift over absence (absent in, absent out); ordering
    comparisons return a plain ``bool`` that is ``False`` when either side is
    absent; ``&``, ``|`` and ``~`` on optional booleans follow three-valued
    logic.

    Example:
        ```python
        name = from_nullable(row.get("name"))
        greeting = name.map(str.title).map(lambda n: f"Hello {n}").get_or_else("Hello?")
        ```
    """

    def has_value(self) -> bool: raise NotImplementedError
    def is_absent(self) -> bool: return not self.has_value()

    def get_or_else(self, default: U) -> Union[T, U]:
        return self.value if self.has_value() else default  # type: ignore[attr-defined]

    def get_or_compute(self, thunk: Callable[[], U]) -> Union[T, U]:
        return self.value if self.has_value() else thunk()  # type: ignore[attr-defined]

    def get_or_fail(self, message: _Maybe[str] = None) -> T:
        if self.has_value():
            return self.value  # type: ignore[attr-defined]
        raise EmptyValueAccess(message)

    def map(self, f: Callable[[T], U]) -> "Optional[U]":
        if self.has_value():
            return Present(f(self.value))  # type: ignore[attr-defined]
        return ABSENT

    def bind(self, f: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        if not self.has_value():
            return ABSENT
        out = f(self.value)  # type: ignore[attr-defined]
        if not isinstance(out, Optional):
            raise TypeError(f"bind() callback must return an Optional, got {type(out).__name__}")
        return out

    flat_map = bind

    def match(self, on_present: Callable[[T], R], on_absent: Callable[[], R]) -> R:
        if self.has_value():
            return on_present(self.value)  # type: ignore[attr-defined]
        return on_absent()

    def filter(self, pred: Callable[[T], bool]) -> "Optional[T]":
        if self.has_value() and pred(self.value):  # type: ignore[attr-defined]
            return self
        return ABSENT

    def or_else(self, alternative: Union["Optional[T]", Callable[[], Any]]) -> "Optional[T]":
        if self.has_value():
            return self
        alt = alternative() if callable(alternative) else alternative
        return from_nullable(alt)

    def zip(self, other: "Optional[U]") -> "Optional[Tuple[T, U]]":
        if self.has_value() and other.has_value():
            return Present((self.value, other.value))  # type: ignore[attr-defined]
        return ABSENT

    def tap(self, f: Callable[[T], Any]) -> "Optional[T]":
        if self.has_value():
            f(self.value)  # type: ignore[attr-defined]
        return self

    def trace(self, label: str, logger: _Maybe[ConsoleLogger] = None) -> "Optional[T]":
        log = logger if logger is not None else get_config().logger
        if self.has_value():
            log.debug(label, variant="present", value=repr(self.value))  # type: ignore[attr-defined]
        else:
            log.debug(label, variant="absent")
        return self

    def to_list(self) -> List[T]:
        return [self.value] if self.has_value() else []  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return False
        if self.has_value() != other.has_value():
            return False
        if not self.has_value():
            return True
        return bool(self.value == other.value)  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        if self.has_value():
            return hash((Present, self.value))  # type: ignore[attr-defined]
        return hash(Absent)

    def __bool__(self) -> NoReturn:
        raise TypeError("truth value of an Optional is ambiguous; use has_value()")

    __add__ = _binary("add"); __radd__ = _binary("add", reflected=True)
    __sub__ = _binary("sub"); __rsub__ = _binary("sub", reflected=True)
    __mul__ = _binary("mul"); __rmul__ = _binary("mul", reflected=True)
    __truediv__ = _binary("truediv"); __rtruediv__ = _binary("truediv", reflected=True)
    __floordiv__ = _binary("floordiv"); __rfloordiv__ = _binary("floordiv", reflected=True)
    __mod__ = _binary("mod"); __rmod__ = _binary("mod", reflected=True)
    __rpow__ = _binary("pow_", reflected=True)
    __lshift__ = _binary("lshift"); __rlshift__ = _binary("lshift", reflected=True)
    __rshift__ = _binary("rshift"); __rrshift__ = _binary("rshift", reflected=True)
    __xor__ = _binary("xor"); __rxor__ = _binary("xor", reflected=True)
    __and__ = _binary("and_"); __rand__ = _binary("and_", reflected=True)
    __or__ = _binary("or_"); __ror__ = _binary("or_", reflected=True)

    def __pow__(self, other, modulo=None):
        from . import lifted
        if modulo is None:
            return lifted.pow_(self, other)
        return lifted.pow_mod(self, other, modulo)

    # Ordering: plain bool, False whenever a side is absent.
    __lt__ = _binary("lt"); __le__ = _binary("le")
    __gt__ = _binary("gt"); __ge__ = _binary("ge")

    __neg__ = _unary("neg"); __pos__ = _unary("pos")
    __abs__ = _unary("abs_"); __invert__ = _unary("invert")


@dataclass(frozen=True, eq=False)
class Present(Optional[T]):
    value: T
    def has_value(self) -> bool: return True
    def __repr__(self) -> str: return f"Present({self.value!r})"


class Absent(Optional[Any]):
    __slots__ = ()
    def has_value(self) -> bool: return False
    def __repr__(self) -> str: return "Absent"

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Absent is immutable")


ABSENT: Optional[Any] = Absent()


def present(value: T) -> Optional[T]:
    return Present(value)


def absent() -> Optional[Any]:
    return ABSENT


def from_nullable(raw: Any) -> Optional[Any]:
    """Cross from a raw possibly-missing value into an ``Optional``.

    ``None`` (and anything the active ``BoundaryConfig`` marks absent-like)
    becomes ``ABSENT``; any other value becomes ``Present(raw)``. An ``Optional``
    is returned as is, so wrapping never nests.
    """
    if isinstance(raw, Optional):
        return raw
    cfg = get_config()
    if cfg.is_absent_like(raw):
        if cfg.logger.enabled("DEBUG"):
            cfg.logger.debug("absent-like value at boundary", raw_type=type(raw).__name__)
        return ABSENT
    return Present(raw)
