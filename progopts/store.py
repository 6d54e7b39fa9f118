# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Storage for parsed option values.

:class:`ResultStore` maps option names to strings given for them,
in order of their appearance on the command line. Options that don't take
an argument store an empty string for every occurrence, so the number
of occurrences is always the number of stored strings::

    >>> from progopts.spec import Option

    >>> store = ResultStore()
    >>> verbose = Option("verbose", "v", allow_multiple=True)
    >>> store.store_option(verbose, None)
    False
    >>> store.store_option(verbose, "ignored")
    False
    >>> store.count("verbose")
    2
    >>> store["verbose"]
    ('', '')

Arguments that don't belong to any option are stored under
the empty name :data:`POSITIONAL`.

.. autodata:: POSITIONAL

.. autoclass:: ResultStore
    :members:

"""

from __future__ import annotations

import copy

import progopts.errors
import progopts.spec
from progopts import _typing as _t

__all__ = [
    "POSITIONAL",
    "ResultStore",
]

POSITIONAL: str = ""
"""
Name under which positional arguments are stored.

"""


class ResultStore(_t.Mapping[str, tuple[str, ...]]):
    """
    Accumulates option occurrences during parsing.

    The store is a read-only mapping for its users; values are added
    with :meth:`store_option` and :meth:`add_positional`.

    """

    def __init__(self):
        self._values: dict[str, list[str]] = {}

    def store_option(
        self, option: progopts.spec.Option, parameter: str | None, /
    ) -> bool:
        """
        Record an occurrence of an option.

        :param option:
            option that was matched.
        :param parameter:
            a candidate value for the option, or :data:`None` if there
            is nothing that could serve as one.
        :returns:
            :data:`True` if ``parameter`` was used as the option's value.
        :raises:
            :class:`~progopts.errors.MultipleInstancesError` if the option
            was already given and doesn't allow multiple occurrences,
            :class:`~progopts.errors.MissingArgumentError` if the option
            expects a value and ``parameter`` is :data:`None`.

        """

        if option.name in self._values and not option.allow_multiple:
            raise progopts.errors.MultipleInstancesError(option.name)

        if not option.expects_value:
            self._values.setdefault(option.name, []).append("")
            return False

        if parameter is None:
            raise progopts.errors.MissingArgumentError(
                f'Option "{option.name}" is missing a required argument',
                option.name,
            )

        self._values.setdefault(option.name, []).append(parameter)
        return True

    def add_positional(self, argument: str, /):
        """
        Record an argument that doesn't belong to any option.

        """

        self._values.setdefault(POSITIONAL, []).append(argument)

    def clear(self):
        """
        Remove all recorded values.

        """

        self._values.clear()

    def given(self, name: str, /) -> bool:
        """
        Check if an option was given.

        """

        return name in self._values

    def count(self, name: str, /) -> int:
        """
        Number of times an option was given, zero if it wasn't.

        """

        return len(self._values.get(name, ()))

    def strings(self, name: str, /) -> list[str]:
        """
        Get a copy of all strings recorded for an option.

        :raises:
            :class:`~progopts.errors.OptionNotGivenError`.

        """

        try:
            return list(self._values[name])
        except KeyError:
            raise progopts.errors.OptionNotGivenError(name) from None

    def as_dict(self) -> dict[str, list[str]]:
        """
        Get a copy of all recorded values as a plain dict.

        """

        return {name: list(values) for name, values in self._values.items()}

    def __getitem__(self, key: str, /) -> tuple[str, ...]:
        return tuple(self._values[key])

    def __iter__(self) -> _t.Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __copy__(self) -> ResultStore:
        res = ResultStore()
        res._values = self.as_dict()
        return res

    def __deepcopy__(self, memo: dict[int, _t.Any]) -> ResultStore:
        res = ResultStore()
        res._values = copy.deepcopy(self._values, memo)
        return res

    def __repr__(self):
        return f"{self.__class__.__name__}({self._values!r})"
