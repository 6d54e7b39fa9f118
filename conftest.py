from __future__ import annotations

import logging

import pytest
from sybil import Sybil
from sybil.parsers.codeblock import PythonCodeBlockParser
from sybil.parsers.doctest import DocTestParser
from sybil.parsers.rest import SkipParser

pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(),
        PythonCodeBlockParser(),
        SkipParser(),
    ],
    patterns=["*.py"],
    excludes=["setup.py", "conftest.py", "test/*", "examples/*"],
).pytest()


@pytest.fixture
def progopts_caplog(caplog: pytest.LogCaptureFixture):
    """
    Like ``caplog``, but also sees records of the ``progopts`` logger,
    which doesn't propagate to the root logger.

    """

    logger = logging.getLogger("progopts")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.DEBUG, logger="progopts"):
            yield caplog
    finally:
        logger.removeHandler(caplog.handler)
