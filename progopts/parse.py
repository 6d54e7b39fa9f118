# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Parsers that convert option strings to numbers.

Every parser converts a string and checks that the result fits into the range
of its type::

    >>> UInt16().parse("8080")
    8080
    >>> UInt16().parse("-1")
    Traceback (most recent call last):
    ...
    progopts.parse.OutOfRangeError: value should be greater or equal to 0, got -1 instead

Narrower bounds are added with :class:`Bound`::

    >>> percent = Bound(Float(), lower_inclusive=0.0, upper_inclusive=100.0)
    >>> percent
    Bound(Float, 0.0 <= x <= 100.0)
    >>> percent.parse("12.5")
    12.5
    >>> percent.parse("twelve")
    Traceback (most recent call last):
    ...
    progopts.parse.ParsingError: can't parse 'twelve' as a float

Integers are given in base 10, floats in decimal or exponential notation.

.. autoclass:: ParsingError

.. autoclass:: OutOfRangeError

.. autoclass:: Parser
    :members:

Value parsers
-------------

.. autoclass:: Int

.. autoclass:: Int16

.. autoclass:: UInt16

.. autoclass:: Int32

.. autoclass:: UInt32

.. autoclass:: Int64

.. autoclass:: UInt64

.. autoclass:: Float

.. autoclass:: Float32

Validators
----------

.. autoclass:: Bound

.. autofunction:: from_type

"""

from __future__ import annotations

import abc
import argparse
import re
import sys

from progopts import _typing as _t

__all__ = [
    "Bound",
    "Float",
    "Float32",
    "Int",
    "Int16",
    "Int32",
    "Int64",
    "OutOfRangeError",
    "Parser",
    "ParsingError",
    "UInt16",
    "UInt32",
    "UInt64",
    "from_type",
]

T_co = _t.TypeVar("T_co", covariant=True)
T = _t.TypeVar("T")

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(
    r"""(?ix)
    ^
    [+-]?
    (?:
      (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
      |inf(?:inity)?
      |nan
    )
    $
    """
)


class ParsingError(ValueError, argparse.ArgumentTypeError):
    """
    Raised when parsing or validation fails.

    This exception is derived from both :class:`ValueError`
    and :class:`argparse.ArgumentTypeError` to ensure that error messages
    are displayed nicely with argparse, and handled correctly in other places.

    """


class OutOfRangeError(ParsingError):
    """
    Raised when a parsed value is outside of the allowed range.

    """


class Parser(abc.ABC, _t.Generic[T_co]):
    """
    Base class for parsers.

    """

    #: Smallest value of this parser's type, or :data:`None` if it's unbounded.
    min_value: _t.Any = None

    #: Largest value of this parser's type, or :data:`None` if it's unbounded.
    max_value: _t.Any = None

    def parse(self, value: str, /) -> T_co:
        """
        Parse user input, raise :class:`ParsingError` on failure.

        :param value:
            value to parse.

        """

        result = self._parse(value)
        self._check_type_range(result)
        return result

    @abc.abstractmethod
    def _parse(self, value: str, /) -> T_co:
        """
        Convert a string without checking type range.

        """

    def _check_type_range(self, value: _t.Any, /):
        _check_range(value, self.min_value, self.max_value)

    def __repr__(self):
        return self.__class__.__name__


class Int(Parser[int]):
    """
    Parser for int values, with no limits on size.

    """

    def _parse(self, value: str, /) -> int:
        stripped = value.strip()
        if not _INT_RE.match(stripped):
            raise ParsingError(f"can't parse {value!r} as an int")
        return int(stripped, 10)


class Int16(Int):
    """
    Parser for signed 16-bit ints.

    """

    min_value = -(2**15)
    max_value = 2**15 - 1


class UInt16(Int):
    """
    Parser for unsigned 16-bit ints.

    """

    min_value = 0
    max_value = 2**16 - 1


class Int32(Int):
    """
    Parser for signed 32-bit ints.

    """

    min_value = -(2**31)
    max_value = 2**31 - 1


class UInt32(Int):
    """
    Parser for unsigned 32-bit ints.

    """

    min_value = 0
    max_value = 2**32 - 1


class Int64(Int):
    """
    Parser for signed 64-bit ints.

    """

    min_value = -(2**63)
    max_value = 2**63 - 1


class UInt64(Int):
    """
    Parser for unsigned 64-bit ints.

    """

    min_value = 0
    max_value = 2**64 - 1


class Float(Parser[float]):
    """
    Parser for double precision floats.

    Infinite values are out of range, whether they are written as ``inf``
    or overflow. ``nan`` passes range checks.

    """

    min_value = -sys.float_info.max
    max_value = sys.float_info.max

    def _parse(self, value: str, /) -> float:
        stripped = value.strip()
        if not _FLOAT_RE.match(stripped):
            raise ParsingError(f"can't parse {value!r} as a float")
        return float(stripped)


class Float32(Float):
    """
    Parser for single precision floats.

    Values are not rounded to single precision, only their range is checked.

    """

    min_value = -3.4028234663852886e38
    max_value = 3.4028234663852886e38


class Bound(Parser[T], _t.Generic[T]):
    """
    Check that value is within inclusive bounds.

    Values are first checked against the range of the inner parser's type.
    Its :attr:`~Parser.min_value` and :attr:`~Parser.max_value` are the bounds
    that actually apply, i.e. the tighter of its own bounds and the inner
    parser's range.

    :param inner:
        parser whose result will be validated.
    :param lower_inclusive:
        set lower bound for value, so we require that ``value >= lower``.
    :param upper_inclusive:
        set upper bound for value, so we require that ``value <= upper``.

    """

    def __init__(
        self,
        inner: Parser[T],
        /,
        *,
        lower_inclusive: _t.Any = None,
        upper_inclusive: _t.Any = None,
    ):
        self._inner = inner
        self._lower_bound = lower_inclusive
        self._upper_bound = upper_inclusive

    @property
    def lower(self) -> _t.Any:
        """
        Lower bound, or :data:`None`.

        """

        return self._lower_bound

    @property
    def upper(self) -> _t.Any:
        """
        Upper bound, or :data:`None`.

        """

        return self._upper_bound

    @property
    def min_value(self) -> _t.Any:  # type: ignore[override]
        return _tighter(self._inner.min_value, self._lower_bound, max)

    @property
    def max_value(self) -> _t.Any:  # type: ignore[override]
        return _tighter(self._inner.max_value, self._upper_bound, min)

    def _parse(self, value: str, /) -> T:
        return self._inner.parse(value)

    def _check_type_range(self, value: _t.Any, /):
        _check_range(value, self._lower_bound, self._upper_bound)

    def __repr__(self):
        desc = ""
        if self._lower_bound is not None:
            desc += repr(self._lower_bound) + " <= "
        desc += "x"
        if self._upper_bound is not None:
            desc += " <= " + repr(self._upper_bound)
        return f"{self.__class__.__name__}({self._inner!r}, {desc})"


def _check_range(value: _t.Any, lower: _t.Any, upper: _t.Any):
    if lower is not None and value < lower:
        raise OutOfRangeError(
            f"value should be greater or equal to {lower}, got {value} instead"
        )
    if upper is not None and upper < value:
        raise OutOfRangeError(
            f"value should be lesser or equal to {upper}, got {value} instead"
        )


def _tighter(a: _t.Any, b: _t.Any, pick: _t.Callable[[_t.Any, _t.Any], _t.Any]):
    if a is None:
        return b
    if b is None:
        return a
    return pick(a, b)


_FROM_TYPE: dict[type, _t.Callable[[], Parser[_t.Any]]] = {
    int: Int,
    float: Float,
}


def from_type(ty: type[T] | Parser[T], /) -> Parser[T]:
    """
    Get a parser for the given type.

    Parsers are returned as is; ``int`` and ``float`` are turned into
    :class:`Int` and :class:`Float`.

    :raises:
        :class:`TypeError` if there's no parser for the given type.

    """

    if isinstance(ty, Parser):
        return ty
    if isinstance(ty, type) and issubclass(ty, Parser):
        return ty()
    if ctor := _FROM_TYPE.get(ty):  # type: ignore
        return ctor()
    raise TypeError(f"can't create a parser for {ty!r}")
