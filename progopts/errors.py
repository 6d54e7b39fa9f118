# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Exceptions raised while installing option specifications, parsing arguments,
and retrieving parsed values.

All of them derive from :class:`OptionsError`, which carries an :class:`ErrorKind`
so that callers can tell errors apart without matching on exception types::

    >>> from progopts.parser import Parser
    >>> from progopts.spec import Option

    >>> parser = Parser([Option("all", "a", "all")])
    >>> try:
    ...     parser.parse_arguments(["ls", "--everything"])
    ... except OptionsError as e:
    ...     print(e.kind, e)
    ErrorKind.INVALID_LONG_OPTION Invalid option specified: --everything

Errors in a specification are fatal and are raised when the specification
is installed. Errors in user input are raised by the parser when it encounters
an offending argument; arguments processed before that remain stored.
Errors raised while retrieving values are ordinary control flow: check
:meth:`~progopts.parser.Parser.option_given` first to avoid them.

.. autoclass:: ErrorKind
    :members:

.. autoclass:: OptionsError

.. autoclass:: SpecificationError

.. autoclass:: InvalidOptionError

.. autoclass:: MultipleInstancesError

.. autoclass:: MissingArgumentError

.. autoclass:: OptionNotGivenError

.. autoclass:: ConversionFailure
    :members:

.. autoclass:: OptionValueError

"""

from __future__ import annotations

import enum

from progopts import _typing as _t

__all__ = [
    "ConversionFailure",
    "ErrorKind",
    "InvalidOptionError",
    "MissingArgumentError",
    "MultipleInstancesError",
    "OptionNotGivenError",
    "OptionValueError",
    "OptionsError",
    "SpecificationError",
]


class ErrorKind(enum.Enum):
    """
    Classification of an :class:`OptionsError`.

    """

    #: The same string is used both as a short and as a long option flag.
    FLAG_CONFLICT = "flag_conflict"

    #: An option has an empty name.
    EMPTY_IDENTIFIER_NAME = "empty_identifier_name"

    #: Two options have the same name.
    DUPLICATE_IDENTIFIER = "duplicate_identifier"

    #: Two options have the same short form.
    DUPLICATE_SHORT_OPTION = "duplicate_short_option"

    #: Two options have the same long form.
    DUPLICATE_LONG_OPTION = "duplicate_long_option"

    #: A short form has more than one character, or an argument contains
    #: an unknown short option.
    INVALID_SHORT_OPTION = "invalid_short_option"

    #: An argument contains an unknown long option.
    INVALID_LONG_OPTION = "invalid_long_option"

    #: An option that is allowed once was given several times.
    MULTIPLE_INSTANCES = "multiple_instances"

    #: An option didn't get the argument it requires, or got an argument
    #: it doesn't accept.
    MISSING_OPTION_ARGUMENT = "missing_option_argument"

    #: A value was requested for an option that wasn't given.
    OPTION_NOT_GIVEN = "option_not_given"

    #: A value could not be converted or is out of range.
    OPTION_VALUE_ERROR = "option_value_error"


class OptionsError(ValueError):
    """
    Base class for all errors raised by Progopts.

    :param msg:
        human-readable error message.
    :param kind:
        error classification.

    """

    def __init__(self, msg: str, kind: ErrorKind, /):
        super().__init__(msg)

        #: Error classification.
        self.kind: ErrorKind = kind


class SpecificationError(OptionsError):
    """
    Raised when an option specification or a flag set is inconsistent.

    """


class InvalidOptionError(OptionsError):
    """
    Raised when an argument looks like an option but doesn't match
    any known option.

    """

    def __init__(self, argument: str, kind: ErrorKind, /):
        super().__init__(f"Invalid option specified: {argument}", kind)

        #: The offending argument.
        self.argument: str = argument


class MultipleInstancesError(OptionsError):
    """
    Raised when an option that doesn't allow multiple occurrences
    is given more than once.

    """

    def __init__(self, option_name: str, /):
        super().__init__(
            f'Option "{option_name}" given multiple times, but only allowed once',
            ErrorKind.MULTIPLE_INSTANCES,
        )

        #: Name of the option.
        self.option_name: str = option_name


class MissingArgumentError(OptionsError):
    """
    Raised when an option expects an argument but doesn't get one.

    Also raised when an argument is attached to an option that doesn't
    expect one (i.e. ``--all=yes``), or when an attached argument is empty
    (i.e. ``--color=``).

    """

    def __init__(self, msg: str, option_name: str, /):
        super().__init__(msg, ErrorKind.MISSING_OPTION_ARGUMENT)

        #: Name of the option.
        self.option_name: str = option_name


class OptionNotGivenError(OptionsError):
    """
    Raised when retrieving values of an option that wasn't given.

    """

    def __init__(self, option_name: str, /):
        super().__init__(
            f'The option ("{option_name}") was not given',
            ErrorKind.OPTION_NOT_GIVEN,
        )

        #: Name of the option.
        self.option_name: str = option_name


class ConversionFailure(enum.Enum):
    """
    Reason why an :class:`OptionValueError` was raised.

    """

    #: Option string could not be parsed.
    PARSE = "parse"

    #: Option value was parsed, but it's outside of the requested bounds.
    RANGE = "range"

    #: Conversion failed for any other reason.
    UNKNOWN = "unknown"


class OptionValueError(OptionsError):
    """
    Raised when an option string can't be converted to the requested type,
    or when the converted value is out of range.

    """

    def __init__(
        self,
        option_name: str,
        value: str | None,
        reason: ConversionFailure,
        /,
        *,
        lower: _t.Any = None,
        upper: _t.Any = None,
    ):
        context = "<unknown>" if value is None else value
        if reason is ConversionFailure.PARSE:
            msg = f'Invalid argument value for "{option_name}": {context}'
        elif reason is ConversionFailure.RANGE:
            msg = (
                f'Argument value for "{option_name}" is out-of-range: {context}'
                f" [valid range is {_fmt_bound(lower)} .. {_fmt_bound(upper)}]"
            )
        else:
            msg = f'Unknown error converting argument "{option_name}": {context}'

        super().__init__(msg, ErrorKind.OPTION_VALUE_ERROR)

        #: Name of the option.
        self.option_name: str = option_name

        #: The option string that failed conversion.
        self.value: str | None = value

        #: Why conversion failed.
        self.reason: ConversionFailure = reason

        #: Lower bound that was in effect, if any.
        self.lower: _t.Any = lower

        #: Upper bound that was in effect, if any.
        self.upper: _t.Any = upper


def _fmt_bound(bound: _t.Any) -> str:
    return "unbounded" if bound is None else str(bound)
