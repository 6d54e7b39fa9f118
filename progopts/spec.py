# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Declaring program options.

Options are declared as a list of :class:`Option` records. Each option has
a name that's used to retrieve its values, and a short and/or a long form
that's used to give it on the command line::

    >>> options = [
    ...     #      Name       Short Long        Multi  Argument
    ...     Option("all",     "a",  "all",      False, False),
    ...     Option("pattern", "p",  "pattern",  True,  True),
    ...     Option("color",   "c",  "color",    False, True),
    ...     Option("size",    "s",  "min-size", False, True),
    ... ]

Which strings start short and long options, and which string separates
a long option from its value, is configured with a :class:`FlagSet`::

    >>> FlagSet()
    FlagSet(short_flags=('-',), long_flags=('--',), separator='=', case_insensitive=False)

A specification is checked for consistency before it's used:

    >>> validate_options(options + [Option("all", "A", "ALL")], POSIX_FLAGS)
    Traceback (most recent call last):
    ...
    progopts.errors.SpecificationError: Duplicate option identifier found: all

.. autoclass:: Option
    :members:

.. autoclass:: FlagSet
    :members:

.. autodata:: POSIX_FLAGS

.. autodata:: DOS_FLAGS

.. autofunction:: validate_options

"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import progopts
import progopts.errors
from progopts import _typing as _t

__all__ = [
    "DOS_FLAGS",
    "FlagSet",
    "Option",
    "POSIX_FLAGS",
    "validate_options",
]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Option:
    """
    Declaration of a single program option.

    """

    name: str
    """
    Name of the option, used to retrieve its values after parsing.

    Must be unique and non-empty; an empty name is reserved for arguments
    that don't belong to any option.

    """

    short_form: str = ""
    """
    A single character that, when preceded by a short flag, gives this option
    (i.e. ``"a"`` for ``-a``). Empty if the option has no short form.

    """

    long_form: str = ""
    """
    A string that, when preceded by a long flag, gives this option
    (i.e. ``"all"`` for ``--all``). Empty if the option has no long form.

    """

    allow_multiple: bool = False
    """
    Whether the option may be given more than once.

    """

    expects_value: bool = False
    """
    Whether the option takes an argument.

    """


def _flag_tuple(flags: _t.Iterable[str], what: str) -> tuple[str, ...]:
    if isinstance(flags, str):
        raise TypeError(f"{what} should be a collection of strings, got {flags!r}")
    return tuple(flags)


@dataclass(frozen=True)
class FlagSet:
    """
    Strings that mark options on the command line.

    Flags and the separator are always matched case-sensitively;
    :attr:`case_insensitive` only affects option forms.

    """

    short_flags: tuple[str, ...] = ("-",)
    """
    Prefixes that start a bundle of short options, i.e. ``"-"`` in ``-czvf``.

    """

    long_flags: tuple[str, ...] = ("--",)
    """
    Prefixes that start a long option, i.e. ``"--"`` in ``--color``.

    Long flags are checked before short flags, and in the given order.

    """

    separator: str = "="
    """
    String that separates a long option from an attached value,
    i.e. ``"="`` in ``--color=red``.

    """

    case_insensitive: bool = False
    """
    Whether option forms are matched ignoring case.

    """

    def __post_init__(self):
        object.__setattr__(
            self, "short_flags", _flag_tuple(self.short_flags, "short_flags")
        )
        object.__setattr__(
            self, "long_flags", _flag_tuple(self.long_flags, "long_flags")
        )


POSIX_FLAGS: FlagSet = FlagSet()
"""
Conventional flags: ``-a``, ``--all``, ``--color=red``.

"""

DOS_FLAGS: FlagSet = FlagSet(
    short_flags=("-",), long_flags=("/",), separator=":", case_insensitive=True
)
"""
DOS-style flags, where options are given like ``/A:D``.

Long forms are usually a single character in this style.

"""


def validate_options(options: _t.Sequence[Option], flags: FlagSet, /):
    """
    Check that a specification and a flag set are consistent.

    Duplicates are detected case-sensitively, even if the flag set
    is case-insensitive.

    :param options:
        options to check.
    :param flags:
        flags to check.
    :raises:
        :class:`~progopts.errors.SpecificationError`.

    """

    for long_flag in flags.long_flags:
        if long_flag in flags.short_flags:
            raise progopts.errors.SpecificationError(
                "Conflicting option flag symbols",
                progopts.errors.ErrorKind.FLAG_CONFLICT,
            )

    names: set[str] = set()
    short_forms: set[str] = set()
    long_forms: set[str] = set()

    for option in options:
        if not option.name:
            raise progopts.errors.SpecificationError(
                "Empty option identifier found",
                progopts.errors.ErrorKind.EMPTY_IDENTIFIER_NAME,
            )

        if option.name in names:
            raise progopts.errors.SpecificationError(
                f"Duplicate option identifier found: {option.name}",
                progopts.errors.ErrorKind.DUPLICATE_IDENTIFIER,
            )
        names.add(option.name)

        if option.short_form:
            if option.short_form in short_forms:
                raise progopts.errors.SpecificationError(
                    f"Duplicate short option observed: {option.short_form}",
                    progopts.errors.ErrorKind.DUPLICATE_SHORT_OPTION,
                )
            if len(option.short_form) > 1:
                raise progopts.errors.SpecificationError(
                    "A short option contains more than one character: "
                    f"{option.short_form}",
                    progopts.errors.ErrorKind.INVALID_SHORT_OPTION,
                )
            short_forms.add(option.short_form)

        if option.long_form:
            if option.long_form in long_forms:
                raise progopts.errors.SpecificationError(
                    f"Duplicate long option observed: {option.long_form}",
                    progopts.errors.ErrorKind.DUPLICATE_LONG_OPTION,
                )
            long_forms.add(option.long_form)

        if not option.short_form and not option.long_form:
            warnings.warn(
                f"option {option.name!r} has neither short nor long form "
                "and can't be given on the command line",
                category=progopts.ProgoptsWarning,
                stacklevel=3,
            )

    _LOGGER.debug("validated %d options", len(options))
