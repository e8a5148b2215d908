"""pytest plugin wiring :class:`PytestReporter` into test items.

Enable it from a ``conftest.py``::

    pytest_plugins = ["fluentassert.pytest_plugin"]

Tests then request the ``reporter`` fixture. Failures reported through
``assert_`` / ``assertf`` are collected and fail the test after its body
returns; ``require`` / ``requiref`` fail it on the spot, listing the collected
failures first. When the body raises any other exception, the collected
failures are attached to the report as a ``fluentassert`` section.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from .adapters.pytest_reporter import PytestReporter
from .observability import log_debug, log_error, scoped_test_id

REPORTER_KEY = pytest.StashKey[PytestReporter]()


@pytest.fixture()
def reporter(request: pytest.FixtureRequest) -> Iterator[PytestReporter]:
    """Provide a reporter bound to the requesting test."""

    instance = PytestReporter()
    request.node.stash[REPORTER_KEY] = instance
    with scoped_test_id(request.node.nodeid):
        yield instance


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Iterator[None]:
    """Fail the test after its body when mark-and-continue failures were recorded."""

    try:
        result = yield
    except Exception as exc:
        # keep recorded failures visible when the body raises
        instance = item.stash.get(REPORTER_KEY, None)
        if instance is not None and instance.failures:
            log_error("test_raised_after_failures", failures=len(instance.failures), error=type(exc).__name__)
            item.add_report_section("call", "fluentassert", instance.summary())
        raise
    instance = item.stash.get(REPORTER_KEY, None)
    if instance is not None and instance.failures:
        log_debug("test_failed_after_body", failures=len(instance.failures))
        pytest.fail(instance.summary(), pytrace=False)
    return result
