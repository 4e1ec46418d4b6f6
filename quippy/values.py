"""Runtime values of the quippy language and the operations defined on them.

Every operation takes its operands by value and returns a new value; values
that do not support an operation produce ``Err()`` rather than raising.
Object entries are stored under encoded keys: ``"$name"`` for string keys and
the decimal text of the number (``"3"``) for integer keys.
"""

from __future__ import annotations

import math
import operator
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class QType:
    """Base class of every quippy value."""

    __slots__ = ()


@dataclass(frozen=True)
class Int(QType):
    """A signed 64-bit integer."""

    value: int


@dataclass(frozen=True)
class Float(QType):
    """A double-precision float."""

    value: float


@dataclass(frozen=True)
class Bool(QType):
    """A boolean."""

    value: bool


@dataclass(frozen=True)
class Str(QType):
    """A text string."""

    value: str


@dataclass(frozen=True)
class Void(QType):
    """The unit value, written ``()``."""


@dataclass(frozen=True)
class Err(QType):
    """The error value produced by unsupported operations."""


@dataclass(frozen=True)
class List(QType):
    """An ordered sequence of values."""

    items: tuple[QType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Obj(QType):
    """A mapping from encoded keys to values."""

    entries: dict[str, QType] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", dict(self.entries))


@dataclass(frozen=True)
class Thread(QType):
    """A thread handle; ``None`` refers to the current thread."""

    id: int | None = None


@dataclass(frozen=True)
class Func(QType):
    """A function value together with its captured scope."""

    scope: dict[str, QType] = field(default_factory=dict)


def _wrap(n: int) -> int:
    return (n - I64_MIN) % 2**64 + I64_MIN


def _from_key(key: str) -> QType:
    if key.startswith("$"):
        return Str(key[1:])
    return Int(int(key))


def _to_key(key: QType) -> str:
    match key:
        case Int(i):
            return str(i)
        case Str(s):
            return f"${s}"
    raise TypeError(f"object keys must be Int or Str, not {type(key).__name__}")


def _format_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "inf" if f > 0 else "-inf"
    text = format(Decimal(repr(f)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _float_to_int(f: float) -> int:
    if math.isnan(f):
        return 0
    if f >= I64_MAX:
        return I64_MAX
    if f <= I64_MIN:
        return I64_MIN
    return int(f)


def _to_int(expr: QType) -> QType:
    match expr:
        case Bool(b):
            return Int(int(b))
        case Float(f):
            return Int(_float_to_int(f))
        case Str(s):
            if _INT_TEXT.fullmatch(s):
                number = int(s)
                if I64_MIN <= number <= I64_MAX:
                    return Int(number)
            return Err()
    return Err()


def _to_float(expr: QType) -> QType:
    match expr:
        case Bool(b):
            return Float(float(int(b)))
        case Int(i):
            return Float(float(i))
        case Str(s):
            if _FLOAT_TEXT.fullmatch(s):
                return Float(float(s))
            return Err()
    return Err()


def _to_bool(expr: QType) -> QType:
    match expr:
        case Int(i):
            return Bool(i != 0)
        case Float(f):
            return Bool(f != 0.0)
        case Str(s):
            return Bool(len(s) != 0)
        case Void():
            return Bool(True)
        case Err():
            return Bool(False)
        case List(items):
            return Bool(len(items) != 0)
        case Obj(entries):
            return Bool(len(entries) != 0)
    return Err()


def _to_list(expr: QType) -> QType:
    match expr:
        case Str(s):
            return List(tuple(Int(b) for b in s.encode("utf-8")))
        case Obj(entries):
            return List(tuple(_from_key(k) for k in entries))
    return Err()


def _to_obj(expr: QType) -> QType:
    match expr:
        case Str(s):
            return Obj({str(i): Int(b) for i, b in enumerate(s.encode("utf-8"))})
        case List(items):
            return Obj({str(i): item for i, item in enumerate(items)})
    return Err()


def _text(expr: QType) -> str:
    match expr:
        case Int(i):
            return str(i)
        case Float(f):
            return _format_float(f)
        case Bool(b):
            return "true" if b else "false"
        case Str(s):
            return s
        case Void():
            return "()"
        case Err():
            return "err"
        case Func():
            return "\\(...) => ..."
        case Thread(None):
            return "@this"
        case Thread(t):
            return f"@{t}"
        case List(items):
            return "[" + "".join(_text(item) for item in items) + "]"
        case Obj(entries):
            if not entries:
                return "{}"
            parts = []
            for key, value in entries.items():
                match _from_key(key):
                    case Str(name):
                        parts.append(f'"{name}": {_text(value)}')
                    case Int(number):
                        parts.append(f"{number}: {_text(value)}")
            return "{ " + "".join(parts) + " }"
    raise TypeError(f"not a quippy value: {expr!r}")


def like(lhs: QType, rhs: QType) -> Bool:
    """Return whether both values are of the same variant."""
    return Bool(type(lhs) is type(rhs))


def into(lhs: QType, rhs: QType) -> QType:
    """Convert ``lhs`` to the variant of ``rhs``."""
    if like(lhs, rhs).value:
        return lhs
    match rhs:
        case Void():
            return Void()
        case Err() | Func() | Thread():
            return Err()
        case Int():
            return _to_int(lhs)
        case Float():
            return _to_float(lhs)
        case Bool():
            return _to_bool(lhs)
        case Str():
            return Str(_text(lhs))
        case List():
            return _to_list(lhs)
        case Obj():
            return _to_obj(lhs)
    raise TypeError(f"not a quippy value: {rhs!r}")


def add(lhs: QType, rhs: QType) -> QType:
    """Add numbers, or concatenate strings, lists and objects."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(_wrap(l + r))
        case Float(l), Float(r):
            return Float(l + r)
        case Str(l), Str(r):
            return Str(l + r)
        case List(l), List(r):
            return List(l + r)
        case Obj(l), Obj(r):
            return Obj({**l, **r})
    return Err()


def sub(lhs: QType, rhs: QType) -> QType:
    """Subtract numbers of the same kind."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(_wrap(l - r))
        case Float(l), Float(r):
            return Float(l - r)
    return Err()


def mul(lhs: QType, rhs: QType) -> QType:
    """Multiply numbers of the same kind."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(_wrap(l * r))
        case Float(l), Float(r):
            return Float(l * r)
    return Err()


def _trunc_div(l: int, r: int) -> int:
    if r == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(l) // abs(r)
    return quotient if (l < 0) == (r < 0) else -quotient


def _float_div(l: float, r: float) -> float:
    if r == 0.0:
        if l == 0.0 or math.isnan(l):
            return math.nan
        return math.copysign(1.0, l) * math.copysign(1.0, r) * math.inf
    return l / r


def div(lhs: QType, rhs: QType) -> QType:
    """Divide numbers; integers truncate toward zero."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(_wrap(_trunc_div(l, r)))
        case Float(l), Float(r):
            return Float(_float_div(l, r))
    return Err()


def modulo(lhs: QType, rhs: QType) -> QType:
    """Remainder of truncating division; the sign follows ``lhs``."""
    match lhs, rhs:
        case Int(l), Int(r):
            if r == 0:
                raise ZeroDivisionError(
                    "attempt to calculate the remainder with a divisor of zero"
                )
            return Int(_wrap(l - r * _trunc_div(l, r)))
        case Float(l), Float(r):
            if r == 0.0 or math.isinf(l):
                return Float(math.nan)
            return Float(math.fmod(l, r))
    return Err()


def and_(lhs: QType, rhs: QType) -> QType:
    """Bitwise and of integers, logical and of booleans."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(l & r)
        case Bool(l), Bool(r):
            return Bool(l and r)
    return Err()


def or_(lhs: QType, rhs: QType) -> QType:
    """Bitwise or of integers, logical or of booleans."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(l | r)
        case Bool(l), Bool(r):
            return Bool(l or r)
    return Err()


def xor(lhs: QType, rhs: QType) -> QType:
    """Bitwise xor of integers, logical xor of booleans."""
    match lhs, rhs:
        case Int(l), Int(r):
            return Int(l ^ r)
        case Bool(l), Bool(r):
            return Bool(l != r)
    return Err()


def not_(expr: QType) -> QType:
    """Bitwise complement of an integer, negation of a boolean."""
    match expr:
        case Int(i):
            return Int(~i)
        case Bool(b):
            return Bool(not b)
    return Err()


def index(lhs: QType, rhs: QType) -> QType:
    """Look up an element of a list or an entry of an object."""
    match lhs:
        case List(items):
            if isinstance(rhs, Int) and 0 <= rhs.value < len(items):
                return items[rhs.value]
            return Err()
        case Obj(entries):
            return entries.get(_to_key(rhs), Err())
    return Err()


def eq(lhs: QType, rhs: QType) -> Bool:
    """Structural equality; values of different variants are never equal."""
    match lhs, rhs:
        case (Int(l), Int(r)) | (Float(l), Float(r)) | (Bool(l), Bool(r)) | (
            Str(l),
            Str(r),
        ):
            return Bool(l == r)
        case (Void(), Void()) | (Err(), Err()):
            return Bool(True)
        case List(l), List(r):
            if len(l) != len(r):
                return Bool(False)
            return Bool(all(eq(a, b).value for a, b in zip(l, r)))
        case Obj(), Obj():
            raise TypeError("objects cannot be compared for equality")
        case Thread(l), Thread(r):
            if (l is None) != (r is None):
                raise TypeError(
                    "cannot compare a numbered thread with the current thread"
                )
            return Bool(l == r)
    return Bool(False)


def ne(lhs: QType, rhs: QType) -> Bool:
    """Negation of :func:`eq`."""
    return Bool(not eq(lhs, rhs).value)


def _order(lhs: QType, rhs: QType, op: Callable[[object, object], bool]) -> Bool:
    match lhs, rhs:
        case (Int(l), Int(r)) | (Float(l), Float(r)) | (Str(l), Str(r)):
            return Bool(op(l, r))
        case Thread(l), Thread(r) if l is not None and r is not None:
            return Bool(op(l, r))
    return Bool(False)


def lt(lhs: QType, rhs: QType) -> Bool:
    """Less than; unordered pairs compare false."""
    return _order(lhs, rhs, operator.lt)


def gt(lhs: QType, rhs: QType) -> Bool:
    """Greater than; unordered pairs compare false."""
    return _order(lhs, rhs, operator.gt)


def le(lhs: QType, rhs: QType) -> Bool:
    """Less than or equal; unordered pairs compare false."""
    return _order(lhs, rhs, operator.le)


def ge(lhs: QType, rhs: QType) -> Bool:
    """Greater than or equal; unordered pairs compare false."""
    return _order(lhs, rhs, operator.ge)