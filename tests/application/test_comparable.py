from __future__ import annotations

from fluentassert import comparable, obj


def test_eq_passes_for_equal_values() -> None:
    assert comparable("abc").eq("abc") == ""


def test_eq_failure_shows_both_values() -> None:
    msg = comparable(1).eq(2)
    assert msg == "the objects are not equal\ngot: 1\nwant: 2"


def test_not_eq() -> None:
    assert comparable(1).not_eq(2) == ""
    assert comparable(1).not_eq(1) == "the objects are equal"


def test_eq_uses_direct_comparison() -> None:
    class Loose:
        def __eq__(self, other: object) -> bool:
            return True

        __hash__ = object.__hash__

    assert comparable(Loose()).eq(Loose()) == ""


def test_object_assertions_are_reachable() -> None:
    wrapper = comparable((1, "a"))
    assert wrapper.deep_eq((1, "a")) == ""
    assert wrapper.not_deep_eq((1, "a")) == "the objects are equal"
    assert wrapper.check(lambda x: "bad") == "bad"
    assert wrapper.should(lambda x: False) == obj((1, "a")).should(lambda x: False)
    assert wrapper.should_not(lambda x: True) == "object meets the predicate criteria"


def test_value_lives_in_embedded_object_capability() -> None:
    wrapper = comparable(42)
    assert wrapper.fluent_obj.got == 42
    assert wrapper.got == 42
