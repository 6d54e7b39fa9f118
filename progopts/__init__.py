# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Progopts: a small engine for parsing program options.

Declare options, install them into a :class:`~progopts.parser.Parser`,
and feed it command line arguments::

    >>> from progopts.parser import Parser
    >>> from progopts.spec import Option

    >>> parser = Parser([
    ...     Option("all", "a", "all"),
    ...     Option("size", "s", "min-size", expects_value=True),
    ... ])
    >>> parser.parse_arguments(["ls", "-a", "--min-size=20", "file"])
    >>> parser.get_option_count("all")
    1
    >>> parser.get_option_value("size", int)
    20
    >>> parser.get_option_strings("")
    ['file']

Modules:

- :mod:`progopts.spec`: option descriptors, flag sets, specification validation;
- :mod:`progopts.match`: the token matcher;
- :mod:`progopts.store`: storage for parsed option values;
- :mod:`progopts.parse`: numeric value parsers;
- :mod:`progopts.parser`: the parser that ties all of the above together;
- :mod:`progopts.errors`: exceptions raised by all of the above.

Debugging
---------

.. autofunction:: enable_internal_logging

.. autoclass:: ProgoptsWarning

"""

from __future__ import annotations

import logging as _logging
import os as _os
import sys as _sys
import warnings

from progopts._version import *  # noqa: F403

__all__ = [
    "ProgoptsWarning",
    "enable_internal_logging",
]


class ProgoptsWarning(RuntimeWarning):
    """
    Base class for all runtime warnings.

    """


_logger = _logging.getLogger("progopts")
_logger.propagate = False

__stderr_handler = _logging.StreamHandler(_sys.__stderr__)
__stderr_handler.setLevel("CRITICAL")
_logger.addHandler(__stderr_handler)


def enable_internal_logging(
    path: str | None = None, level: str | int | None = None, propagate=None
):  # pragma: no cover
    """
    Enable Progopts' internal logging.

    This function enables :func:`logging.captureWarnings`, enables printing
    of :class:`ProgoptsWarning` messages, and sets up logging channels ``progopts``
    and ``py.warning``.

    :param path:
        if given, adds handlers that output internal log messages to the given file.
    :param level:
        configures logging level for file handler. Default is ``DEBUG``.
    :param propagate:
        if given, enables or disables log message propagation from ``progopts``
        and ``py.warning`` to the root logger.

    """

    if path:
        if level is None:
            level = _os.environ.get("PROGOPTS_DEBUG", "").strip().upper() or "DEBUG"
        if level in ["1", "Y", "YES", "TRUE"]:
            level = "DEBUG"
        file_handler = _logging.FileHandler(path, delay=True)
        file_handler.setFormatter(
            _logging.Formatter("%(filename)s:%(lineno)d: %(levelname)s: %(message)s")
        )
        file_handler.setLevel(level)
        _logger.setLevel(level)
        _logger.addHandler(file_handler)
        _logging.getLogger("py.warnings").addHandler(file_handler)

    _logging.captureWarnings(True)
    warnings.simplefilter("default", category=ProgoptsWarning)

    if propagate is not None:
        _logging.getLogger("py.warnings").propagate = propagate
        _logger.propagate = propagate


_debug = "PROGOPTS_DEBUG" in _os.environ or "PROGOPTS_DEBUG_FILE" in _os.environ
if _debug:  # pragma: no cover
    enable_internal_logging(
        path=_os.environ.get("PROGOPTS_DEBUG_FILE") or "progopts.log", propagate=False
    )
else:
    warnings.simplefilter("ignore", category=ProgoptsWarning, append=True)
