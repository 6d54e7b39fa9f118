# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
The program options parser.

A :class:`Parser` holds an option specification, a flag set, and results
of the last parse::

    >>> from progopts.spec import Option

    >>> parser = Parser([
    ...     #      Name       Short Long        Multi  Argument
    ...     Option("all",     "a",  "all",      False, False),
    ...     Option("pattern", "p",  "pattern",  True,  True),
    ...     Option("color",   "c",  "color",    False, True),
    ...     Option("size",    "s",  "min-size", False, True),
    ... ])
    >>> parser.parse_arguments([
    ...     "ls", "-a", "-p", "foo", "file1", "-p", "bar",
    ...     "--color", "red", "-s", "20", "file2", "file3",
    ... ])

The first argument is the name of the program, it's always skipped.

After parsing, check which options were given, and retrieve their values::

    >>> parser.option_given("color")
    True
    >>> parser.get_option_string("color")
    'red'
    >>> parser.get_option_strings("pattern")
    ['foo', 'bar']
    >>> parser.get_option_strings("")
    ['file1', 'file2', 'file3']

Values can be converted to numbers and checked against bounds::

    >>> from progopts.parse import UInt32

    >>> parser.get_option_value("size", UInt32, min_value=0, max_value=999)
    20
    >>> parser.get_option_value("size", UInt32, min_value=0, max_value=9)
    Traceback (most recent call last):
    ...
    progopts.errors.OptionValueError: Argument value for "size" is out-of-range: 20 [valid range is 0 .. 9]

Retrieving values of an option that wasn't given is an error,
check :meth:`~Parser.option_given` or :meth:`~Parser.get_option_count` first::

    >>> parser.get_option_count("verbose")
    0
    >>> parser.get_option_string("verbose")
    Traceback (most recent call last):
    ...
    progopts.errors.OptionNotGivenError: The option ("verbose") was not given

Parser is not thread-safe. If it's used from several threads,
access to it should be serialized.

.. autoclass:: Parser
    :members:

"""

from __future__ import annotations

import copy
import logging

import progopts.errors
import progopts.match
import progopts.parse
import progopts.spec
import progopts.store
from progopts import _typing as _t

__all__ = [
    "Parser",
]

T = _t.TypeVar("T")

_LOGGER = logging.getLogger(__name__)


class Parser:
    """
    Parses program arguments according to an option specification.

    :param options:
        option specification.
    :param flags:
        flags used to recognize options.
    :raises:
        :class:`~progopts.errors.SpecificationError` if the specification
        is not consistent.

    """

    def __init__(
        self,
        options: _t.Iterable[progopts.spec.Option] = (),
        flags: progopts.spec.FlagSet = progopts.spec.POSIX_FLAGS,
    ):
        self._options: tuple[progopts.spec.Option, ...] = ()
        self._flags: progopts.spec.FlagSet = progopts.spec.POSIX_FLAGS
        self._results = progopts.store.ResultStore()

        self.set_options(options, flags)

    @property
    def options(self) -> tuple[progopts.spec.Option, ...]:
        """
        Installed option specification.

        """

        return self._options

    @property
    def flags(self) -> progopts.spec.FlagSet:
        """
        Installed flag set.

        """

        return self._flags

    @property
    def results(self) -> progopts.store.ResultStore:
        """
        Results of the last parse.

        """

        return self._results

    def set_options(
        self,
        options: _t.Iterable[progopts.spec.Option],
        flags: progopts.spec.FlagSet = progopts.spec.POSIX_FLAGS,
    ):
        """
        Install a new option specification and flag set.

        Results of any previous parse are cleared. If the specification
        is not consistent, the previous one stays installed.

        :param options:
            option specification.
        :param flags:
            flags used to recognize options.
        :raises:
            :class:`~progopts.errors.SpecificationError`.

        """

        options = tuple(options)
        self.clear_options()
        progopts.spec.validate_options(options, flags)
        self._options = options
        self._flags = flags

    def clear_options(self):
        """
        Clear results of any previous parse.

        """

        self._results.clear()

    def parse_arguments(self, arguments: _t.Sequence[str], /):
        """
        Parse program arguments.

        Results of any previous parse are cleared first. If an error occurs,
        arguments before the offending one remain parsed.

        :param arguments:
            program arguments, including the name of the program as the first
            element. It is skipped when parsing. If there's nothing but
            the name of the program, nothing is parsed.
        :raises:
            :class:`~progopts.errors.InvalidOptionError`,
            :class:`~progopts.errors.MultipleInstancesError`,
            :class:`~progopts.errors.MissingArgumentError`.

        """

        self.clear_options()

        arguments = list(arguments)
        if len(arguments) <= 1:
            return

        _LOGGER.debug("parsing %d arguments", len(arguments) - 1)

        matcher = progopts.match.TokenMatcher(
            self._options, self._flags, self._results
        )

        i = 1
        while i < len(arguments):
            parameter = arguments[i + 1] if i + 1 < len(arguments) else None
            if matcher.process(arguments[i], parameter):
                i += 1
            i += 1

    def option_given(self, name: str, /) -> bool:
        """
        Check if an option was given.

        """

        return self._results.given(name)

    def get_option_count(self, name: str, /) -> int:
        """
        Get number of times an option was given. Returns zero if it wasn't given.

        For positional arguments (``name=""``), returns their number.

        """

        return self._results.count(name)

    def get_option_string(self, name: str, /) -> str:
        """
        Get value of an option. If it was given several times,
        return the first value.

        :raises:
            :class:`~progopts.errors.OptionNotGivenError`.

        """

        return self._results.strings(name)[0]

    def get_option_strings(self, name: str, /) -> list[str]:
        """
        Get all values of an option, in order they were given.

        :raises:
            :class:`~progopts.errors.OptionNotGivenError`.

        """

        return self._results.strings(name)

    def get_option_value(
        self,
        name: str,
        ty: type[T] | progopts.parse.Parser[T] = int,
        /,
        *,
        min_value: T | None = None,
        max_value: T | None = None,
    ) -> T:
        """
        Get value of an option converted to a number. If it was given
        several times, return the first value.

        See :meth:`~Parser.get_option_values` for details.

        """

        return self.get_option_values(
            name, ty, min_value=min_value, max_value=max_value
        )[0]

    def get_option_values(
        self,
        name: str,
        ty: type[T] | progopts.parse.Parser[T] = int,
        /,
        *,
        min_value: T | None = None,
        max_value: T | None = None,
    ) -> list[T]:
        """
        Get all values of an option converted to numbers.

        :param name:
            name of the option.
        :param ty:
            a parser from :mod:`progopts.parse` (or its class), or ``int``,
            or ``float``.
        :param min_value:
            smallest allowed value. Bounds of the parser's type apply
            as well, errors report whichever bound is tighter.
        :param max_value:
            largest allowed value. Bounds of the parser's type apply
            as well, errors report whichever bound is tighter.
        :returns:
            converted values, in order they were given.
        :raises:
            :class:`~progopts.errors.OptionNotGivenError`,
            :class:`~progopts.errors.OptionValueError`.

        """

        strings = self._results.strings(name)

        parser = progopts.parse.from_type(ty)
        bound = progopts.parse.Bound(
            parser, lower_inclusive=min_value, upper_inclusive=max_value
        )
        lower, upper = bound.min_value, bound.max_value

        values: list[T] = []
        context: str | None = None
        try:
            for context in strings:
                values.append(bound.parse(context))
        except progopts.parse.OutOfRangeError as e:
            raise progopts.errors.OptionValueError(
                name,
                context,
                progopts.errors.ConversionFailure.RANGE,
                lower=lower,
                upper=upper,
            ) from e
        except progopts.parse.ParsingError as e:
            raise progopts.errors.OptionValueError(
                name, context, progopts.errors.ConversionFailure.PARSE
            ) from e
        except Exception as e:
            raise progopts.errors.OptionValueError(
                name, context, progopts.errors.ConversionFailure.UNKNOWN
            ) from e

        return values

    def copy(self) -> Parser:
        """
        Make an independent copy of this parser, including parsing results.

        """

        return copy.deepcopy(self)

    def take(self) -> Parser:
        """
        Move specification, flags and results to a new parser.

        This parser is left with an empty specification, default flags,
        and no results.

        """

        res = self.__class__.__new__(self.__class__)
        res._options = self._options
        res._flags = self._flags
        res._results = self._results

        self._options = ()
        self._flags = progopts.spec.POSIX_FLAGS
        self._results = progopts.store.ResultStore()

        return res

    def __copy__(self) -> Parser:
        res = self.__class__.__new__(self.__class__)
        res._options = self._options
        res._flags = self._flags
        res._results = copy.copy(self._results)
        return res

    def __deepcopy__(self, memo: dict[int, _t.Any]) -> Parser:
        res = self.__class__.__new__(self.__class__)
        res._options = self._options
        res._flags = self._flags
        res._results = copy.deepcopy(self._results, memo)
        return res

    def __repr__(self):
        return (
            f"{self.__class__.__name__}("
            f"options={list(self._options)!r}, flags={self._flags!r})"
        )
