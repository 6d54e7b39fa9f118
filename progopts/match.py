# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Matching command line arguments against an option specification.

:class:`TokenMatcher` looks at one argument at a time and decides whether it's
a long option, a bundle of short options, or a plain string. It writes its
findings into a :class:`~progopts.store.ResultStore`::

    >>> from progopts.spec import FlagSet, Option
    >>> from progopts.store import ResultStore

    >>> options = (
    ...     Option("create", "c", "create"),
    ...     Option("compress", "z", "compress"),
    ...     Option("file", "f", "file", expects_value=True),
    ... )
    >>> store = ResultStore()
    >>> matcher = TokenMatcher(options, FlagSet(), store)

    >>> # `-czf` is a bundle, so `archive.tgz` is consumed as `f`'s value.
    >>> matcher.process("-czf", "archive.tgz")
    True
    >>> matcher.process("--compress=yes", None)
    Traceback (most recent call last):
    ...
    progopts.errors.MissingArgumentError: Option "compress" should not have a parameter: yes
    >>> store.as_dict()
    {'create': [''], 'compress': [''], 'file': ['archive.tgz']}

Long options are tried first. An argument is a long option if it starts with
one of the long flags. Everything after the flag is compared with long forms
of all options, in order of their declaration; the first option whose long form
either matches the rest of the argument exactly, or is followed by the value
separator, wins.

If the argument doesn't start with a long flag, but starts with a short flag,
every character after the flag is a short option. Only the last short option
in a bundle can take the next argument as its value.

Flags that aren't followed by anything (i.e. ``-`` or ``--``) are treated
as plain strings, as well as arguments that don't start with a flag.

.. autoclass:: TokenMatcher
    :members:

"""

from __future__ import annotations

import logging

import progopts.errors
import progopts.spec
import progopts.store
from progopts import _typing as _t

__all__ = [
    "TokenMatcher",
]

_LOGGER = logging.getLogger(__name__)


class TokenMatcher:
    """
    Classifies arguments and stores matched options.

    The matcher doesn't keep any state between arguments; all results
    go to the given store.

    :param options:
        option specification, assumed to be validated.
    :param flags:
        flags used to recognize options.
    :param store:
        where to put matched options and plain strings.

    """

    def __init__(
        self,
        options: _t.Sequence[progopts.spec.Option],
        flags: progopts.spec.FlagSet,
        store: progopts.store.ResultStore,
    ):
        self._options = options
        self._flags = flags
        self._store = store

    def process(self, argument: str, parameter: str | None, /) -> bool:
        """
        Process a single argument.

        :param argument:
            argument to process.
        :param parameter:
            the argument that follows, or :data:`None` if ``argument`` is the last
            one. It will be used as a value if ``argument`` is an option
            that expects one.
        :returns:
            :data:`True` if ``parameter`` was consumed as an option's value,
            and should be skipped by the caller.
        :raises:
            :class:`~progopts.errors.InvalidOptionError`,
            :class:`~progopts.errors.MultipleInstancesError`,
            :class:`~progopts.errors.MissingArgumentError`.

        """

        if argument:
            result = self._process_long(argument, parameter)
            if result is not None:
                return result

            result = self._process_short(argument, parameter)
            if result is not None:
                return result

        _LOGGER.debug("plain string %r", argument)
        self._store.add_positional(argument)
        return False

    def _process_long(self, argument: str, parameter: str | None) -> bool | None:
        rest = _strip_flag(self._flags.long_flags, argument)
        if rest is None:
            return None
        if not rest:
            _LOGGER.debug("lone long flag %r", argument)
            self._store.add_positional(argument)
            return False

        separator = self._flags.separator

        for option in self._options:
            if not option.long_form:
                continue

            matched = _match_prefix(
                option.long_form, rest, self._flags.case_insensitive
            )
            if matched < len(option.long_form):
                continue

            if matched == len(rest):
                _LOGGER.debug("long option %r in %r", option.name, argument)
                return self._store.store_option(option, parameter)

            tail = rest[matched:]
            if tail.startswith(separator):
                value = tail[len(separator) :]
                if not option.expects_value:
                    raise progopts.errors.MissingArgumentError(
                        f'Option "{option.name}" should not have a parameter: '
                        f"{value}",
                        option.name,
                    )
                if not value:
                    raise progopts.errors.MissingArgumentError(
                        f'Option "{option.name}" appears to have been given '
                        f"an empty parameter: {argument}",
                        option.name,
                    )
                _LOGGER.debug(
                    "long option %r with attached value in %r", option.name, argument
                )
                self._store.store_option(option, value)
                return False

            # Matched a prefix of a longer word, i.e. `--foo` in `--foobar`.
            # Another option may match it completely.

        raise progopts.errors.InvalidOptionError(
            argument, progopts.errors.ErrorKind.INVALID_LONG_OPTION
        )

    def _process_short(self, argument: str, parameter: str | None) -> bool | None:
        rest = _strip_flag(self._flags.short_flags, argument)
        if rest is None:
            return None
        if not rest:
            _LOGGER.debug("lone short flag %r", argument)
            self._store.add_positional(argument)
            return False

        consumed = False

        for i, ch in enumerate(rest):
            option = self._find_short(ch)
            if option is None:
                raise progopts.errors.InvalidOptionError(
                    argument, progopts.errors.ErrorKind.INVALID_SHORT_OPTION
                )
            _LOGGER.debug("short option %r in %r", option.name, argument)
            if i == len(rest) - 1:
                consumed = self._store.store_option(option, parameter)
            else:
                # Options in the middle of a bundle have nothing to use as a value.
                self._store.store_option(option, None)

        return consumed

    def _find_short(self, ch: str) -> progopts.spec.Option | None:
        for option in self._options:
            if option.short_form and _chars_equal(
                option.short_form, ch, self._flags.case_insensitive
            ):
                return option
        return None


def _strip_flag(flags: _t.Iterable[str], argument: str) -> str | None:
    """
    Return the part of ``argument`` after the first flag it starts with,
    or :data:`None` if it doesn't start with any of them.

    """

    for flag in flags:
        if argument.startswith(flag):
            return argument[len(flag) :]
    return None


def _match_prefix(form: str, text: str, case_insensitive: bool) -> int:
    """
    Count how many leading characters of ``form`` match ``text``.

    """

    n = 0
    for a, b in zip(form, text):
        if not _chars_equal(a, b, case_insensitive):
            break
        n += 1
    return n


def _chars_equal(a: str, b: str, case_insensitive: bool) -> bool:
    return a == b or (case_insensitive and a.upper() == b.upper())
