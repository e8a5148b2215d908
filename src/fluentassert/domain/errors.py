"""Domain-level exception hierarchy.

Purpose
-------
Expose the small error taxonomy used at the outer edges of the toolkit. An
assertion failure is never one of these: assertions always return a
:class:`~fluentassert.application.message.FailureMessage` value. Exceptions are
reserved for misconfiguration and for the abort path of the bundled reporters.

Contents
--------
* :class:`FluentAssertError` – umbrella base class for all library errors.
* :class:`InvalidSetting` – an environment setting could not be interpreted.
* :class:`TestAborted` – raised by the bundled stub reporters when a failure
  is reported through the mark-and-abort operation.

System Role
-----------
The composition root raises :class:`InvalidSetting` while building
:class:`~fluentassert.domain.settings.DiffSettings`. :mod:`fluentassert.testing`
raises :class:`TestAborted` so that ``require`` halts callers that run without
a test framework.
"""

from __future__ import annotations


class FluentAssertError(Exception):
    """Base type for all exceptions emitted by ``fluentassert``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidSetting(FluentAssertError):
    """Raised when an environment setting has an unusable value.

    Typical Sources
    ---------------
    :func:`fluentassert.core.load_settings` when ``FLUENTASSERT_DIFF__WIDTH``
    is not a positive integer or ``FLUENTASSERT_DIFF__CONTEXT`` is negative.
    """


class TestAborted(FluentAssertError):
    """Signals that a reporter stopped the calling test.

    Why
    ----
    Minimal reporters have no test runner to halt, so their mark-and-abort
    operation raises this instead. The message carries the reported text.
    """

    __test__ = False
