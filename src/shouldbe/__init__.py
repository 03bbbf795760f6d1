"""Fluent should-style assertions on top of a host test framework."""

import logging

from shouldbe.reporting import (
    AssertionReporter,
    PytestReporter,
    Reporter,
    UnittestReporter,
    get_reporter,
    set_reporter,
    use_reporter,
)
from shouldbe.assertions import *  # noqa: F403
from shouldbe.assertions import __all__ as _assertions_all
from shouldbe.config import ReporterType, ShouldConfig, configure, load_config
from shouldbe.fluent import Should, The, should, the

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    *_assertions_all,
    "AssertionReporter",
    "PytestReporter",
    "Reporter",
    "ReporterType",
    "Should",
    "ShouldConfig",
    "The",
    "UnittestReporter",
    "configure",
    "get_reporter",
    "load_config",
    "set_reporter",
    "should",
    "the",
    "use_reporter",
]
