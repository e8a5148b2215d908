"""Public package surface for ``fluentassert``.

Assertions return :class:`FailureMessage` values instead of raising, so several
checks can be merged before a single report decides whether the test goes on:

>>> from fluentassert import ordered
>>> from fluentassert.testing import RecordingReporter
>>> msg = ordered(3).lesser(2).merge("second check", ordered(3).eq(4))
>>> rec = RecordingReporter()
>>> msg.assert_(rec, "ordering:")
False
>>> rec.entries[0][0]
'error'
"""

from __future__ import annotations

from .core import (
    DiffSettings,
    FailureMessage,
    FluentAssertError,
    FluentComparable,
    FluentObj,
    FluentOrdered,
    InvalidSetting,
    TestAborted,
    comparable,
    load_settings,
    obj,
    ordered,
)
from .observability import bind_test_id, get_logger

__all__ = [
    "DiffSettings",
    "FailureMessage",
    "FluentAssertError",
    "FluentComparable",
    "FluentObj",
    "FluentOrdered",
    "InvalidSetting",
    "TestAborted",
    "bind_test_id",
    "comparable",
    "get_logger",
    "load_settings",
    "obj",
    "ordered",
]
