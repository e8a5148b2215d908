"""Logging for the reporting boundary.

Purpose
    Record which failures were reported, through which reporter, and for which
    test, while leaving handler and formatter choices to the host application.

Contents
    - ``TEST_ID``: context variable naming the test that is reporting.
    - ``get_logger``: the package logger, silent until a handler is attached.
    - ``bind_test_id`` / ``scoped_test_id``: set the test identifier, either
      directly or for the duration of a ``with`` block.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit one record whose
      ``context`` attribute carries the test identifier and the given fields.
    - ``make_event``: fields describing one reported failure.

System Integration
    ``FailureMessage`` logs each report, the pytest plugin logs how a test
    ended, and the CLI logs its outcomes. Assertion methods never log.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

TEST_ID: ContextVar[str | None] = ContextVar("fluentassert_test_id", default=None)
"""Identifier of the test currently reporting failures (a pytest node id)."""

_LOGGER: Final[logging.Logger] = logging.getLogger("fluentassert")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``fluentassert`` logger so applications may attach handlers."""

    return _LOGGER


def bind_test_id(test_id: str | None) -> None:
    """Bind *test_id* for subsequent log records; ``None`` clears it.

    Examples
    --------
    >>> bind_test_id('tests/test_demo.py::test_one')
    >>> TEST_ID.get()
    'tests/test_demo.py::test_one'
    >>> bind_test_id(None)
    >>> TEST_ID.get() is None
    True
    """

    TEST_ID.set(test_id)


@contextmanager
def scoped_test_id(test_id: str) -> Iterator[None]:
    """Bind *test_id* inside the block and restore the previous binding after.

    Examples
    --------
    >>> with scoped_test_id('tests/test_demo.py::test_two'):
    ...     TEST_ID.get()
    'tests/test_demo.py::test_two'
    >>> TEST_ID.get() is None
    True
    """

    token = TEST_ID.set(test_id)
    try:
        yield
    finally:
        TEST_ID.reset(token)


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def log_error(message: str, /, **fields: Any) -> None:
    _emit(logging.ERROR, message, fields)


def make_event(
    mode: str,
    lines: int,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe one reported failure.

    Inputs
        mode: Reporter operation used (``error``, ``fatal``, ``errorf`` or
        ``fatalf``).
        lines: Line count of the reported message.
        payload: Extra fields; they may override neither key above.

    Examples
    --------
    >>> make_event('error', 3, {'reporter': 'PrintReporter'})
    {'reporter': 'PrintReporter', 'mode': 'error', 'lines': 3}
    """

    return {**(payload or {}), "mode": mode, "lines": lines}


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    if not _LOGGER.isEnabledFor(level):
        return
    _LOGGER.log(level, message, extra={"context": {"test_id": TEST_ID.get(), **fields}})
