"""Failure message value and its reporting protocol.

Purpose
-------
Every assertion returns a :class:`FailureMessage`. The empty string means the
assertion passed; any other text explains the failure. The message is plain
data until one of the reporting methods hands it to the host test-reporting
object, which is the only point where a failure becomes a side effect.

Contents
--------
* :class:`FailureMessage` – ``str`` subclass with ``assert_`` / ``require`` /
  ``assertf`` / ``requiref`` reporting and ``merge`` accumulation.

System Role
-----------
Assertions in :mod:`fluentassert.application.obj` and friends build messages;
tests and custom assertions combine them with :meth:`FailureMessage.merge`
and finally report them against a reporter satisfying the protocols in
:mod:`fluentassert.application.ports`.
"""

from __future__ import annotations

from typing import Any

from ..observability import log_info, make_event
from .ports import ErrorfReporter, ErrorReporter, FatalfReporter, FatalReporter, HelperReporter


class FailureMessage(str):
    """Failure description returned by every assertion; ``""`` means passed.

    Why
    ----
    Returning failures as values lets callers decide late whether to continue,
    abort, or fold the result into a larger report.

    Examples
    --------
    >>> FailureMessage().passed
    True
    >>> msg = FailureMessage().merge("first", "x").merge("second", "y")
    >>> print(msg)
    first
    x
    <BLANKLINE>
    second
    y
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"FailureMessage({str.__repr__(self)})"

    @property
    def passed(self) -> bool:
        """``True`` when the message is empty."""

        return not self

    @property
    def failed(self) -> bool:
        """``True`` when the message carries a failure description."""

        return bool(self)

    def assert_(self, reporter: ErrorReporter, *args: Any) -> bool:
        """Report through ``reporter.error`` when the message is not empty.

        What
        ----
        Does nothing and returns ``True`` for an empty message. Otherwise calls
        ``reporter.error(*args, "\\n" + message)`` and returns ``False``. The
        calling test keeps running.

        Side Effects
        ------------
        Invokes ``reporter.helper()`` first when the reporter offers it and
        emits a ``failure_reported`` info event.
        """

        __tracebackhide__ = True
        if not self:
            return True
        if isinstance(reporter, HelperReporter):
            reporter.helper()
        self._log("error", reporter)
        reporter.error(*args, "\n" + str(self))
        return False

    def require(self, reporter: FatalReporter, *args: Any) -> bool:
        """Report through ``reporter.fatal`` when the message is not empty.

        Same branching as :meth:`assert_`, but the mark-and-abort operation is
        expected to stop the calling test. ``True`` is returned only when the
        message is empty.
        """

        __tracebackhide__ = True
        if not self:
            return True
        if isinstance(reporter, HelperReporter):
            reporter.helper()
        self._log("fatal", reporter)
        reporter.fatal(*args, "\n" + str(self))
        return False

    def assertf(self, reporter: ErrorfReporter, format: str, *args: Any) -> bool:
        """Formatted :meth:`assert_`; the message is appended via a trailing ``%s``.

        Examples
        --------
        >>> from fluentassert.testing import RecordingReporter
        >>> rec = RecordingReporter()
        >>> FailureMessage("boom").assertf(rec, "case %d:", 7)
        False
        >>> rec.entries
        [('errorf', 'case 7:\\nboom')]
        """

        __tracebackhide__ = True
        if not self:
            return True
        if isinstance(reporter, HelperReporter):
            reporter.helper()
        self._log("errorf", reporter)
        reporter.errorf(format + "%s", *args, "\n" + str(self))
        return False

    def requiref(self, reporter: FatalfReporter, format: str, *args: Any) -> bool:
        """Formatted :meth:`require`; the message is appended via a trailing ``%s``."""

        __tracebackhide__ = True
        if not self:
            return True
        if isinstance(reporter, HelperReporter):
            reporter.helper()
        self._log("fatalf", reporter)
        reporter.fatalf(format + "%s", *args, "\n" + str(self))
        return False

    def merge(self, header: str, failure_message: str) -> FailureMessage:
        """Return this message with *failure_message* accumulated under *header*.

        What
        ----
        An empty *failure_message* leaves the receiver unchanged and drops the
        header. An empty receiver becomes ``header + "\\n" + failure_message``.
        Otherwise the new block is appended after a blank line, so blocks keep
        the order of the ``merge`` calls.

        Examples
        --------
        >>> FailureMessage("kept").merge("ignored", "")
        FailureMessage('kept')
        >>> FailureMessage().merge("A", "x").merge("B", "y")
        FailureMessage('A\\nx\\n\\nB\\ny')
        """

        if not failure_message:
            return self
        if not self:
            return FailureMessage(f"{header}\n{failure_message}")
        return FailureMessage(f"{self}\n\n{header}\n{failure_message}")

    def _log(self, mode: str, reporter: object) -> None:
        log_info(
            "failure_reported",
            **make_event(mode, self.count("\n") + 1, {"reporter": type(reporter).__name__}),
        )
