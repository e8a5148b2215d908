"""End-to-end coverage of the pytest plugin using ``pytester``.

Each scenario writes a small test module into an isolated directory, enables
the plugin through a conftest, and inspects the resulting outcomes.
"""

from __future__ import annotations

import pytest

CONFTEST = 'pytest_plugins = ["fluentassert.pytest_plugin"]\n'


@pytest.fixture()
def plugin_pytester(pytester: pytest.Pytester) -> pytest.Pytester:
    pytester.makeconftest(CONFTEST)
    return pytester


def test_passing_assertions_leave_test_green(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import obj, ordered

        def test_ok(reporter):
            assert obj([1, 2]).deep_eq([1, 2]).assert_(reporter)
            assert ordered(1).lesser(2).require(reporter)
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(passed=1)


def test_assert_collects_failures_and_continues(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import ordered

        REACHED = []

        def test_collects(reporter):
            ordered(3).lesser(1).assert_(reporter, "first")
            ordered(3).greater(5).assert_(reporter, "second")
            REACHED.append(True)

        def test_body_finished():
            assert REACHED == [True]
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(passed=1, failed=1)
    result.stdout.fnmatch_lines(
        [
            "*test_assert_collects_failures_and_continues.py:6: first*",
            "the object is not lesser",
            "*test_assert_collects_failures_and_continues.py:7: second*",
            "the object is not greater",
        ]
    )


def test_require_stops_the_test(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import obj

        REACHED = []

        def test_stops(reporter):
            obj({"a": 1}).deep_eq({"a": 2}).require(reporter, "payload")
            REACHED.append(True)

        def test_body_stopped():
            assert REACHED == []
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(passed=1, failed=1)
    result.stdout.fnmatch_lines(["*mismatch (-want +got):*", "*- {'a': 2}", "*+ {'a': 1}"])


def test_merged_message_is_reported_once(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import FailureMessage, comparable, ordered

        def test_merged(reporter):
            msg = FailureMessage()
            msg = msg.merge("age", ordered(10).greater_or_equal(18))
            msg = msg.merge("name", comparable("bob").eq("bob"))
            msg = msg.merge("id", comparable(1).not_eq(1))
            msg.assertf(reporter, "user %s:", "bob")
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*user bob:",
            "age",
            "the object is not greater or equal",
            "",
            "id",
            "the objects are equal",
        ]
    )
    result.stdout.no_fnmatch_line("name")


def test_require_keeps_earlier_collected_failures(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import ordered

        def test_soft_then_hard(reporter):
            ordered(3).lesser(1).assert_(reporter, "FIRST_SOFT")
            ordered(3).greater(5).require(reporter, "HARD_STOP")
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*test_require_keeps_earlier_collected_failures.py:4: FIRST_SOFT*",
            "*the object is not lesser*",
            "*HARD_STOP*",
            "*the object is not greater*",
        ]
    )


def test_unexpected_exception_keeps_collected_failures(plugin_pytester: pytest.Pytester) -> None:
    plugin_pytester.makepyfile(
        """
        from fluentassert import ordered

        def test_soft_then_raise(reporter):
            ordered(3).lesser(1).assert_(reporter, "FIRST_SOFT")
            raise RuntimeError("unexpected")
        """
    )
    result = plugin_pytester.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*RuntimeError: unexpected*",
            "*Captured fluentassert call*",
            "*test_unexpected_exception_keeps_collected_failures.py:4: FIRST_SOFT*",
            "the object is not lesser",
        ]
    )
