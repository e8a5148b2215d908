"""pytest reporter adapter.

Purpose
-------
Give pytest tests a reporter with mark-and-continue semantics, which pytest
itself lacks. ``error`` calls are collected and fail the test once its body
finishes (see :mod:`fluentassert.pytest_plugin`); ``fatal`` calls stop the
test immediately through :func:`pytest.fail`, carrying any failures recorded
before them.

Key behaviours
--------------
* ``helper()`` marks the calling function as a helper, mirroring the optional
  capability probed by the reporting boundary.
* Recorded failures are prefixed with the first non-helper caller location,
  so they point at the test line that reported them.
"""

from __future__ import annotations

import inspect
from pathlib import Path
from types import CodeType, FrameType
from typing import Any

import pytest

from ..observability import log_debug
from ..testing import render_args


class PytestReporter:
    """Reporter bound to a single pytest test item."""

    def __init__(self) -> None:
        self._failures: list[str] = []
        self._helpers: set[CodeType] = set()

    @property
    def failures(self) -> list[str]:
        """Recorded mark-and-continue failures, in reporting order."""

        return list(self._failures)

    def helper(self) -> None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            self._helpers.add(caller.f_code)

    def error(self, *args: Any) -> None:
        self._record(render_args(*args))

    def errorf(self, format: str, *args: Any) -> None:
        self._record(format % args)

    def fatal(self, *args: Any) -> None:
        __tracebackhide__ = True
        self._abort(render_args(*args))

    def fatalf(self, format: str, *args: Any) -> None:
        __tracebackhide__ = True
        self._abort(format % args)

    def summary(self) -> str:
        """Join every recorded failure, separated by blank lines."""

        return "\n\n".join(self._failures)

    def _abort(self, text: str) -> None:
        # earlier mark-and-continue failures precede the aborting one
        __tracebackhide__ = True
        if self._failures:
            text = f"{self.summary()}\n\n{text}"
        pytest.fail(text)

    def _record(self, text: str) -> None:
        location = self._caller_location()
        self._failures.append(f"{location}: {text}" if location else text)
        log_debug("failure_recorded", location=location, total=len(self._failures))

    def _caller_location(self) -> str | None:
        frame: FrameType | None = inspect.currentframe()
        own_codes = {PytestReporter._record.__code__, PytestReporter._caller_location.__code__}
        own_codes |= {PytestReporter.error.__code__, PytestReporter.errorf.__code__}
        while frame is not None and (frame.f_code in own_codes or frame.f_code in self._helpers):
            frame = frame.f_back
        if frame is None:
            return None
        return f"{Path(frame.f_code.co_filename).name}:{frame.f_lineno}"
