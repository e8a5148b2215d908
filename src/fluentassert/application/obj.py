"""Object capability: assertions valid for any value.

Purpose
-------
Wrap a single value of any type and offer deep-equality, predicate, and
custom-check assertions. Each assertion is a pure function from the owned
value and the caller's input to a
:class:`~fluentassert.application.message.FailureMessage`; nothing here reports
or logs.

Contents
--------
* :data:`MISMATCH_HEADER` – prefix placed before every structural diff.
* :class:`FluentObj` – the object-level capability wrapper.

System Role
-----------
Bottom of the capability chain. :class:`~fluentassert.application.comparable.FluentComparable`
holds a :class:`FluentObj` and forwards to it; the differ is supplied through
the :class:`~fluentassert.application.ports.Differ` port.
"""

from __future__ import annotations

from typing import Callable, Final, Generic, TypeVar

from .message import FailureMessage
from .ports import Differ

T = TypeVar("T")

MISMATCH_HEADER: Final[str] = "mismatch (-want +got):\n"
OBJECTS_EQUAL: Final[str] = "the objects are equal"
PREDICATE_NOT_MET: Final[str] = "object does not meet the predicate criteria"
PREDICATE_MET: Final[str] = "object meets the predicate criteria"


class FluentObj(Generic[T]):
    """Assertions available for any value.

    Why
    ----
    Every value benefits from structural equality, predicates, and an escape
    hatch for bespoke checks, regardless of whether its type supports ``==`` or
    ordering in a meaningful way.

    Parameters
    ----------
    got:
        The value under test. Any value is accepted, ``None`` included.
    differ:
        The :class:`~fluentassert.application.ports.Differ` behind ``deep_eq``.
        The composition root supplies
        :class:`~fluentassert.adapters.differ.default.StructuralDiffer`.

    Examples
    --------
    >>> from fluentassert.adapters.differ.default import StructuralDiffer
    >>> FluentObj([1, 2, 3], differ=StructuralDiffer()).deep_eq([1, 2, 3])
    FailureMessage('')
    >>> FluentObj(None, differ=StructuralDiffer()).not_deep_eq(None)
    FailureMessage('the objects are equal')
    """

    __slots__ = ("_got", "_differ")

    def __init__(self, got: T, *, differ: Differ) -> None:
        self._got = got
        self._differ = differ

    @property
    def got(self) -> T:
        """The owned value."""

        return self._got

    @property
    def differ(self) -> Differ:
        return self._differ

    def deep_eq(self, want: T) -> FailureMessage:
        """Pass when ``got`` is structurally equal to *want*.

        What
        ----
        Delegates to the differ. A non-empty listing becomes
        ``"mismatch (-want +got):\\n"`` followed by the listing. Two ``None``
        values are equal.

        Examples
        --------
        >>> from fluentassert.adapters.differ.default import StructuralDiffer
        >>> print(FluentObj({"name": "wrong"}, differ=StructuralDiffer()).deep_eq({"name": "right"}))
        mismatch (-want +got):
        - {'name': 'right'}
        + {'name': 'wrong'}
        """

        diff = self._differ.diff(want, self._got)
        if not diff:
            return FailureMessage()
        return FailureMessage(MISMATCH_HEADER + diff)

    def not_deep_eq(self, want: T) -> FailureMessage:
        """Pass when ``got`` is *not* structurally equal to *want*."""

        if self._differ.diff(want, self._got):
            return FailureMessage()
        return FailureMessage(OBJECTS_EQUAL)

    def check(self, fn: Callable[[T], str]) -> FailureMessage:
        """Run a custom check; its returned text is used verbatim as the message.

        Why
        ----
        Generic escape hatch for assertions the capabilities do not cover.

        Examples
        --------
        >>> from fluentassert.adapters.differ.default import StructuralDiffer
        >>> FluentObj(3, differ=StructuralDiffer()).check(lambda x: "" if x % 2 else "even")
        FailureMessage('')
        >>> FluentObj(4, differ=StructuralDiffer()).check(lambda x: "" if x % 2 else "even")
        FailureMessage('even')
        """

        return FailureMessage(fn(self._got))

    def should(self, pred: Callable[[T], bool]) -> FailureMessage:
        """Pass when *pred* holds for ``got``."""

        if pred(self._got):
            return FailureMessage()
        return FailureMessage(PREDICATE_NOT_MET)

    def should_not(self, pred: Callable[[T], bool]) -> FailureMessage:
        """Pass when *pred* does not hold for ``got``."""

        if not pred(self._got):
            return FailureMessage()
        return FailureMessage(PREDICATE_MET)
