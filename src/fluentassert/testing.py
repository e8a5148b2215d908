"""Minimal reporters for environments without a test framework.

Purpose
    Provide reporter implementations that satisfy the ports in
    :mod:`fluentassert.application.ports` without pytest: one that records every
    call for inspection and one that prints.

Contents
    - ``FAILURE_MESSAGE``: stable text used by the CLI ``fail`` command.
    - ``RecordingReporter``: records ``(kind, text)`` entries and counts
      ``helper`` calls; its abort operations raise ``TestAborted``.
    - ``PrintReporter``: writes failures to a stream and offers no ``helper``.

System Integration
    Used by the CLI, by doctests, and by the unit suites that verify the
    reporting protocol of :class:`~fluentassert.application.message.FailureMessage`.
"""

from __future__ import annotations

import sys
from typing import Any, Final, TextIO

from .domain.errors import TestAborted

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message reported by the CLI ``fail`` command.

Why
    End-to-end tests assert on the exact wording to guarantee deterministic
    output.
"""


def render_args(*args: Any) -> str:
    """Join reporter arguments with single spaces.

    Examples
    --------
    >>> render_args("context", 3, "\\nmessage")
    'context 3 \\nmessage'
    """

    return " ".join(str(arg) for arg in args)


class RecordingReporter:
    """Reporter that keeps every call for later inspection.

    Examples
    --------
    >>> rec = RecordingReporter()
    >>> rec.error("ctx", "\\nboom")
    >>> rec.entries
    [('error', 'ctx \\nboom')]
    >>> rec.failed
    True
    """

    def __init__(self) -> None:
        self.entries: list[tuple[str, str]] = []
        self.helper_calls = 0

    @property
    def failed(self) -> bool:
        return bool(self.entries)

    def helper(self) -> None:
        self.helper_calls += 1

    def error(self, *args: Any) -> None:
        self.entries.append(("error", render_args(*args)))

    def errorf(self, format: str, *args: Any) -> None:
        self.entries.append(("errorf", format % args))

    def fatal(self, *args: Any) -> None:
        text = render_args(*args)
        self.entries.append(("fatal", text))
        raise TestAborted(text)

    def fatalf(self, format: str, *args: Any) -> None:
        text = format % args
        self.entries.append(("fatalf", text))
        raise TestAborted(text)


class PrintReporter:
    """Print-based reporter with no helper-frame support.

    ``error`` variants write one block per call to *stream*; ``fatal`` variants
    write the block and raise :class:`TestAborted`.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def error(self, *args: Any) -> None:
        self._write(render_args(*args))

    def errorf(self, format: str, *args: Any) -> None:
        self._write(format % args)

    def fatal(self, *args: Any) -> None:
        text = render_args(*args)
        self._write(text)
        raise TestAborted(text)

    def fatalf(self, format: str, *args: Any) -> None:
        text = format % args
        self._write(text)
        raise TestAborted(text)

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(text, file=stream)
