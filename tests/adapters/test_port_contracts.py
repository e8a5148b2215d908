"""Adapter contract tests for the application-layer ports.

Verify the bundled adapters keep satisfying the protocols in
``src/fluentassert/application/ports.py`` so assertions and failure messages
can rely on the abstractions alone.
"""

from __future__ import annotations

import pytest

from fluentassert.adapters.differ.default import StructuralDiffer
from fluentassert.adapters.pytest_reporter import PytestReporter
from fluentassert.application import ports
from fluentassert.testing import PrintReporter, RecordingReporter


def test_structural_differ_contract() -> None:
    """StructuralDiffer must fulfil the Differ protocol and return '' for equal values."""

    differ = StructuralDiffer()
    assert isinstance(differ, ports.Differ)
    assert differ.diff(None, None) == ""
    assert differ.diff(1, 2) != ""


@pytest.mark.parametrize("reporter_cls", [RecordingReporter, PrintReporter, PytestReporter])
def test_reporters_satisfy_reporter_protocol(reporter_cls: type) -> None:
    """Every bundled reporter offers the full four-method reporting surface."""

    reporter = reporter_cls()
    assert isinstance(reporter, ports.ErrorReporter)
    assert isinstance(reporter, ports.FatalReporter)
    assert isinstance(reporter, ports.ErrorfReporter)
    assert isinstance(reporter, ports.FatalfReporter)
    assert isinstance(reporter, ports.Reporter)


def test_helper_capability_is_optional() -> None:
    """Only reporters that track call sites expose the helper probe."""

    assert isinstance(PytestReporter(), ports.HelperReporter)
    assert isinstance(RecordingReporter(), ports.HelperReporter)
    assert not isinstance(PrintReporter(), ports.HelperReporter)
