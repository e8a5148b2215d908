"""Environment loader adapter tests clarifying namespace coercion."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fluentassert.adapters.env.default import DefaultEnvLoader, assign_nested, default_env_prefix


def test_default_env_prefix() -> None:
    """Slug values should become upper snake-case prefixes."""

    assert default_env_prefix("fluent-assert") == "FLUENT_ASSERT"


def test_env_loader_nested() -> None:
    """Coerce environment variables into nested dictionaries while ignoring out-of-scope keys."""

    environ = {
        "FLUENTASSERT_DIFF__WIDTH": "100",
        "FLUENTASSERT_DIFF__CONTEXT": "none",
        "FLUENTASSERT_VERBOSE": "true",
        "OTHER": "ignored",
    }
    data = DefaultEnvLoader(environ=environ).load("FLUENTASSERT")
    assert data == {"diff": {"width": 100, "context": None}, "verbose": True}


def test_empty_environ_is_not_replaced_by_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLUENTASSERT_DIFF__WIDTH", "33")
    assert DefaultEnvLoader(environ={}).load("FLUENTASSERT") == {}
    assert DefaultEnvLoader().load("FLUENTASSERT") == {"diff": {"width": 33}}


def test_assign_nested_overwrites_scalar_raises() -> None:
    """Protect existing scalar values from being replaced by new nested assignments."""

    container: dict[str, object] = {"a": "value"}
    with pytest.raises(ValueError):
        assign_nested(container, "A__B", 1)


SCALAR_VALUES = st.sampled_from(["0", "1", "true", "false", "3.5", "none", "-4", "debug"])
NAMESPACE_KEYS = st.sampled_from(["DIFF__WIDTH", "DIFF__CONTEXT", "LOGGING__LEVEL"])


@given(st.dictionaries(NAMESPACE_KEYS, SCALAR_VALUES, max_size=3))
def test_env_loader_handles_random_namespace(entries: dict[str, str]) -> None:
    """Randomised namespace inputs should map to consistent nested/coerced payloads."""

    environ = {"DEMO_" + key: value for key, value in entries.items()}
    environ["IGNORED"] = "1"
    payload = DefaultEnvLoader(environ=environ).load("DEMO")

    expected = {"0": 0, "1": 1, "true": True, "false": False, "3.5": 3.5, "none": None, "-4": -4, "debug": "debug"}
    for key, original in entries.items():
        section, name = key.lower().split("__")
        assert payload[section][name] == expected[original]
    assert "ignored" not in payload
