"""Comparable capability: direct equality on top of the object capability.

Purpose
-------
Values whose type supports ``==`` get ``eq`` / ``not_eq`` assertions that
compare directly instead of traversing structure. The wrapper holds a
:class:`~fluentassert.application.obj.FluentObj` over the same value and
forwards every object-level assertion to it, so the value is stored once.
"""

from __future__ import annotations

from typing import Callable, Final, Generic, TypeVar

from .message import FailureMessage
from .obj import FluentObj
from .ports import Differ, SupportsEquality

C = TypeVar("C", bound=SupportsEquality)

NOT_EQUAL: Final[str] = "the objects are not equal"
EQUAL: Final[str] = "the objects are equal"


class FluentComparable(Generic[C]):
    """Assertions for values that support direct equality comparison.

    Examples
    --------
    >>> from fluentassert.adapters.differ.default import StructuralDiffer
    >>> FluentComparable("abc", differ=StructuralDiffer()).eq("abc")
    FailureMessage('')
    >>> print(FluentComparable(1, differ=StructuralDiffer()).eq(2))
    the objects are not equal
    got: 1
    want: 2
    >>> FluentComparable(1, differ=StructuralDiffer()).fluent_obj.got
    1
    """

    __slots__ = ("_fluent_obj",)

    def __init__(self, got: C, *, differ: Differ) -> None:
        self._fluent_obj: FluentObj[C] = FluentObj(got, differ=differ)

    @property
    def fluent_obj(self) -> FluentObj[C]:
        """The embedded object capability holding the value."""

        return self._fluent_obj

    @property
    def got(self) -> C:
        return self._fluent_obj.got

    def eq(self, want: C) -> FailureMessage:
        """Pass when ``got == want``; the failure shows both values."""

        got = self._fluent_obj.got
        if got == want:
            return FailureMessage()
        return FailureMessage(f"{NOT_EQUAL}\ngot: {got!r}\nwant: {want!r}")

    def not_eq(self, want: C) -> FailureMessage:
        """Pass when ``got != want``."""

        if self._fluent_obj.got != want:
            return FailureMessage()
        return FailureMessage(EQUAL)

    def deep_eq(self, want: C) -> FailureMessage:
        return self._fluent_obj.deep_eq(want)

    def not_deep_eq(self, want: C) -> FailureMessage:
        return self._fluent_obj.not_deep_eq(want)

    def check(self, fn: Callable[[C], str]) -> FailureMessage:
        return self._fluent_obj.check(fn)

    def should(self, pred: Callable[[C], bool]) -> FailureMessage:
        return self._fluent_obj.should(pred)

    def should_not(self, pred: Callable[[C], bool]) -> FailureMessage:
        return self._fluent_obj.should_not(pred)
