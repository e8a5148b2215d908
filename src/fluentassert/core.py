"""Composition root for ``fluentassert``.

Purpose
-------
Provide the construction entry points for each capability level and the
settings loader that wires the environment adapter to the differ.

Contents
--------
* :func:`obj` / :func:`comparable` / :func:`ordered` – build the capability
  wrappers. Constructing the top-level wrapper is the only step a caller needs.
* :func:`load_settings` – read :class:`DiffSettings` from the environment.
* :func:`_coerce_width` / :func:`_coerce_context` – validation helpers.

System Role
-----------
Consumers import from here (re-exported by the package root). Adapters are
wired here; the ``application`` and ``domain`` layers import no adapter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, TypeVar

from .adapters.differ.default import StructuralDiffer
from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .application.comparable import FluentComparable
from .application.message import FailureMessage
from .application.obj import FluentObj
from .application.ordered import FluentOrdered
from .application.ports import Differ, SupportsEquality, SupportsOrdering
from .domain.errors import FluentAssertError, InvalidSetting, TestAborted
from .domain.settings import DEFAULT_SETTINGS, DiffSettings
from .observability import log_debug

SLUG: Final[str] = "fluentassert"

T = TypeVar("T")
C = TypeVar("C", bound=SupportsEquality)
O = TypeVar("O", bound=SupportsOrdering)

_DEFAULT_DIFFER: Final[Differ] = StructuralDiffer()


def obj(got: T, *, differ: Differ | None = None) -> FluentObj[T]:
    """Wrap *got* in the object capability.

    Examples
    --------
    >>> obj({"a": [1, 2]}).deep_eq({"a": [1, 2]}).passed
    True
    """

    return FluentObj(got, differ=_pick_differ(differ))


def comparable(got: C, *, differ: Differ | None = None) -> FluentComparable[C]:
    """Wrap *got* in the comparable capability (object assertions included).

    Examples
    --------
    >>> comparable("abc").not_eq("abd").passed
    True
    """

    return FluentComparable(got, differ=_pick_differ(differ))


def ordered(got: O, *, differ: Differ | None = None) -> FluentOrdered[O]:
    """Wrap *got* in the ordered capability (comparable and object assertions included).

    Examples
    --------
    >>> ordered(5).greater_or_equal(5).passed
    True
    >>> ordered(5).greater(5)
    FailureMessage('the object is not greater')
    """

    return FluentOrdered(got, differ=_pick_differ(differ))


def _pick_differ(differ: Differ | None) -> Differ:
    """Return *differ*, or the shared default :class:`StructuralDiffer` when absent."""

    return _DEFAULT_DIFFER if differ is None else differ


def load_settings(environ: Mapping[str, str] | None = None) -> DiffSettings:
    """Return :class:`DiffSettings` built from ``FLUENTASSERT_*`` variables.

    Why
    ----
    Diff output width and context trimming are presentation choices that CI
    logs and local terminals want to tune without code changes.

    What
    ----
    Reads ``FLUENTASSERT_DIFF__WIDTH`` and ``FLUENTASSERT_DIFF__CONTEXT`` via
    :class:`DefaultEnvLoader` and falls back to :data:`DEFAULT_SETTINGS` for
    anything unset.

    Raises
    ------
    InvalidSetting
        When a value has the wrong type or is out of range.

    Examples
    --------
    >>> load_settings({"FLUENTASSERT_DIFF__WIDTH": "120", "FLUENTASSERT_DIFF__CONTEXT": "2"})
    DiffSettings(width=120, context=2)
    >>> load_settings({})
    DiffSettings(width=80, context=None)
    """

    try:
        payload = DefaultEnvLoader(environ=environ).load(default_env_prefix(SLUG))
    except ValueError as exc:
        raise InvalidSetting(str(exc)) from exc
    section = payload.get("diff", {})
    if not isinstance(section, Mapping):
        raise InvalidSetting(f"{default_env_prefix(SLUG)}_DIFF must use nested keys such as DIFF__WIDTH")
    settings = DiffSettings(
        width=_coerce_width(section.get("width", DEFAULT_SETTINGS.width)),
        context=_coerce_context(section.get("context", DEFAULT_SETTINGS.context)),
    )
    log_debug("settings_loaded", width=settings.width, context=settings.context)
    return settings


def _coerce_width(value: object) -> int:
    """Validate the render width.

    Examples
    --------
    >>> _coerce_width(40)
    40
    >>> _coerce_width(0)
    Traceback (most recent call last):
    ...
    fluentassert.domain.errors.InvalidSetting: diff width must be a positive integer, got 0
    """

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidSetting(f"diff width must be a positive integer, got {value!r}")
    return value


def _coerce_context(value: object) -> int | None:
    """Validate the context line count; ``None`` keeps the full listing."""

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidSetting(f"diff context must be a non-negative integer or none, got {value!r}")
    return value


__all__ = [
    "FailureMessage",
    "FluentObj",
    "FluentComparable",
    "FluentOrdered",
    "FluentAssertError",
    "InvalidSetting",
    "TestAborted",
    "DiffSettings",
    "obj",
    "comparable",
    "ordered",
    "load_settings",
]
