"""Application-layer ports describing the collaborators the toolkit talks to.

Purpose
-------
Define the structural contracts for the two external collaborators: the host
test-reporting object and the structural differ. Assertions and failure
messages depend only on these protocols, never on a concrete test framework.

Contents
--------
* :class:`ErrorReporter` / :class:`FatalReporter` – variadic mark-and-continue
  and mark-and-abort operations.
* :class:`ErrorfReporter` / :class:`FatalfReporter` – their formatted twins.
* :class:`Reporter` – the full four-method reporting surface.
* :class:`HelperReporter` – optional probe that attributes failures to the
  caller's frame.
* :class:`Differ` – produces a line-oriented structural difference listing.
* :class:`SupportsEquality` / :class:`SupportsOrdering` – static constraints
  for the comparable and ordered capabilities.

System Role
-----------
All protocols are ``runtime_checkable`` so the reporting boundary can probe
for :class:`HelperReporter` with ``isinstance`` and contract tests can verify
adapters against them.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorReporter(Protocol):
    """Mark the running test as failed and let it continue."""

    def error(self, *args: Any) -> None:
        """Record a failure built from *args*."""


@runtime_checkable
class FatalReporter(Protocol):
    """Mark the running test as failed and stop it."""

    def fatal(self, *args: Any) -> None:
        """Record a failure built from *args* and halt the caller."""


@runtime_checkable
class ErrorfReporter(Protocol):
    """Formatted variant of :class:`ErrorReporter`."""

    def errorf(self, format: str, *args: Any) -> None:
        """Record ``format % args`` and let the test continue."""


@runtime_checkable
class FatalfReporter(Protocol):
    """Formatted variant of :class:`FatalReporter`."""

    def fatalf(self, format: str, *args: Any) -> None:
        """Record ``format % args`` and halt the caller."""


@runtime_checkable
class Reporter(ErrorReporter, FatalReporter, ErrorfReporter, FatalfReporter, Protocol):
    """Full reporting surface offered by a test framework handle."""


@runtime_checkable
class HelperReporter(Protocol):
    """Optional capability: treat the calling frame as a helper.

    Why
    ----
    Failure locations should point at the test that called an assertion, not at
    the reporting code inside this package. Reporters that track call sites
    expose ``helper`` and the reporting boundary invokes it before reporting.
    """

    def helper(self) -> None:
        """Mark the caller's frame as a helper frame."""


@runtime_checkable
class Differ(Protocol):
    """Produce a structural difference listing between two values.

    Contract
    --------
    Returns ``""`` when *want* and *got* are structurally equal (two ``None``
    values included) and a deterministic, line-oriented listing otherwise.
    """

    def diff(self, want: object, got: object) -> str:
        """Return the difference listing for ``(want, got)``."""


class SupportsEquality(Protocol):
    """Values that can be compared directly with ``==`` and ``!=``."""

    def __eq__(self, other: Any, /) -> bool: ...

    def __ne__(self, other: Any, /) -> bool: ...


class SupportsOrdering(SupportsEquality, Protocol):
    """Values that support equality and a total ordering."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...
