"""Ordered capability: strict and non-strict ordering assertions.

Holds a :class:`~fluentassert.application.comparable.FluentComparable` (which
in turn holds a :class:`~fluentassert.application.obj.FluentObj`) and forwards
all of their assertions, forming the chain ordered → comparable → object.
"""

from __future__ import annotations

from typing import Callable, Final, Generic, TypeVar

from .comparable import FluentComparable
from .message import FailureMessage
from .ports import Differ, SupportsOrdering

O = TypeVar("O", bound=SupportsOrdering)

NOT_LESSER: Final[str] = "the object is not lesser"
NOT_LESSER_OR_EQUAL: Final[str] = "the object is not lesser or equal"
NOT_GREATER: Final[str] = "the object is not greater"
NOT_GREATER_OR_EQUAL: Final[str] = "the object is not greater or equal"


class FluentOrdered(Generic[O]):
    """Assertions for values with a total ordering.

    Examples
    --------
    >>> from fluentassert.adapters.differ.default import StructuralDiffer
    >>> FluentOrdered(0, differ=StructuralDiffer()).lesser(1)
    FailureMessage('')
    >>> FluentOrdered(0, differ=StructuralDiffer()).greater(0)
    FailureMessage('the object is not greater')
    >>> FluentOrdered(123, differ=StructuralDiffer()).fluent_comparable.fluent_obj.got
    123
    """

    __slots__ = ("_fluent_comparable",)

    def __init__(self, got: O, *, differ: Differ) -> None:
        self._fluent_comparable: FluentComparable[O] = FluentComparable(got, differ=differ)

    @property
    def fluent_comparable(self) -> FluentComparable[O]:
        """The embedded comparable capability."""

        return self._fluent_comparable

    @property
    def got(self) -> O:
        return self._fluent_comparable.got

    def lesser(self, bound: O) -> FailureMessage:
        """Pass when ``got < bound``."""

        if self.got < bound:
            return FailureMessage()
        return FailureMessage(NOT_LESSER)

    def lesser_or_equal(self, bound: O) -> FailureMessage:
        """Pass when ``got <= bound``."""

        if self.got <= bound:
            return FailureMessage()
        return FailureMessage(NOT_LESSER_OR_EQUAL)

    def greater(self, bound: O) -> FailureMessage:
        """Pass when ``got > bound``."""

        if self.got > bound:
            return FailureMessage()
        return FailureMessage(NOT_GREATER)

    def greater_or_equal(self, bound: O) -> FailureMessage:
        """Pass when ``got >= bound``."""

        if self.got >= bound:
            return FailureMessage()
        return FailureMessage(NOT_GREATER_OR_EQUAL)

    def eq(self, want: O) -> FailureMessage:
        return self._fluent_comparable.eq(want)

    def not_eq(self, want: O) -> FailureMessage:
        return self._fluent_comparable.not_eq(want)

    def deep_eq(self, want: O) -> FailureMessage:
        return self._fluent_comparable.deep_eq(want)

    def not_deep_eq(self, want: O) -> FailureMessage:
        return self._fluent_comparable.not_deep_eq(want)

    def check(self, fn: Callable[[O], str]) -> FailureMessage:
        return self._fluent_comparable.check(fn)

    def should(self, pred: Callable[[O], bool]) -> FailureMessage:
        return self._fluent_comparable.should(pred)

    def should_not(self, pred: Callable[[O], bool]) -> FailureMessage:
        return self._fluent_comparable.should_not(pred)
