"""Object capability scenarios: deep equality, custom checks, and predicates."""

from __future__ import annotations

from dataclasses import dataclass, field

from fluentassert import obj
from fluentassert.application.obj import FluentObj


@dataclass
class A:
    str_: str = ""
    bool_: bool = False
    slice_: list[int] = field(default_factory=list)


def test_deep_eq_passes_for_equal_structures() -> None:
    want = A(str_="string", bool_=True, slice_=[1, 2, 3])
    got = A(str_="string", bool_=True, slice_=[1, 2, 3])
    assert obj(got).deep_eq(want) == ""


def test_deep_eq_fails_with_mismatch_header() -> None:
    want = A(str_="string", bool_=True, slice_=[1, 2, 3])
    got = A(str_="wrong", bool_=True, slice_=[1, 3])
    msg = obj(got).deep_eq(want)
    assert msg.startswith("mismatch (-want +got):\n")
    assert "'wrong'" in msg
    assert "'string'" in msg


def test_deep_eq_treats_two_none_values_as_equal() -> None:
    got: A | None = None
    assert obj(got).deep_eq(None) == ""


def test_not_deep_eq_passes_for_different_structures() -> None:
    want = A(str_="string", bool_=True, slice_=[1, 2, 3])
    got = A(str_="wrong", bool_=True, slice_=[1, 3])
    assert obj(got).not_deep_eq(want) == ""


def test_not_deep_eq_fails_for_equal_structures() -> None:
    want = A(str_="string", bool_=True, slice_=[1, 2, 3])
    got = A(str_="string", bool_=True, slice_=[1, 2, 3])
    assert obj(got).not_deep_eq(want) == "the objects are equal"


def test_not_deep_eq_fails_for_two_none_values() -> None:
    got: A | None = None
    assert obj(got).not_deep_eq(None) == "the objects are equal"


def test_check_uses_returned_text_verbatim() -> None:
    assert obj(A()).check(lambda x: "") == ""
    assert obj(A()).check(lambda x: "failure") == "failure"


def test_check_receives_the_owned_value() -> None:
    seen: list[A] = []
    value = A(str_="x")

    def fn(x: A) -> str:
        seen.append(x)
        return ""

    obj(value).check(fn)
    assert seen == [value]
    assert seen[0] is value


def test_should() -> None:
    assert obj(A()).should(lambda x: True) == ""
    assert obj(A()).should(lambda x: False) == "object does not meet the predicate criteria"


def test_should_not() -> None:
    assert obj(A()).should_not(lambda x: False) == ""
    assert obj(A()).should_not(lambda x: True) == "object meets the predicate criteria"


def test_custom_differ_is_used() -> None:
    class FixedDiffer:
        def __init__(self, listing: str) -> None:
            self.listing = listing
            self.calls: list[tuple[object, object]] = []

        def diff(self, want: object, got: object) -> str:
            self.calls.append((want, got))
            return self.listing

    differ = FixedDiffer("- 1\n+ 2")
    msg = FluentObj(2, differ=differ).deep_eq(1)
    assert msg == "mismatch (-want +got):\n- 1\n+ 2"
    assert differ.calls == [(1, 2)]
    assert FluentObj(2, differ=FixedDiffer("")).not_deep_eq(1) == "the objects are equal"


def test_got_exposes_the_wrapped_value() -> None:
    value = {"k": [1]}
    assert obj(value).got is value
