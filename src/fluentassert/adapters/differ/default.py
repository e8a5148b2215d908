"""Structural differ adapter.

Purpose
-------
Implement the :class:`~fluentassert.application.ports.Differ` port used by
``deep_eq`` / ``not_deep_eq``. Equality recurses into containers, dataclasses
and plain objects; the listing is a line diff of the pretty-printed values.

Key behaviours
--------------
* Two ``None`` values are equal; ``None`` against anything else is not.
* Lists and tuples must share their concrete type; mappings compare key sets
  first. Dataclasses and plain objects (classes keeping ``object.__eq__``)
  compare field by field; plain-object fields come from ``__dict__`` and
  ``__slots__``.
* Self-referential values terminate: a pair already under comparison counts
  as equal, and the listing renders the repeat as ``<Recursion on list>``.
* Lines are prefixed ``"- "`` for *want*, ``"+ "`` for *got* and ``"  "`` for
  shared context, matching the ``mismatch (-want +got)`` header.
* :class:`~fluentassert.domain.settings.DiffSettings` controls the render width
  and optional context trimming.
"""

from __future__ import annotations

import difflib
import pprint
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Iterator

from ...domain.settings import DEFAULT_SETTINGS, DiffSettings


class StructuralDiffer:
    """Compare two values structurally and render a ``-want +got`` listing.

    Examples
    --------
    >>> differ = StructuralDiffer()
    >>> differ.diff([1, 2], [1, 2])
    ''
    >>> print(differ.diff({"a": 1}, {"a": 2}))
    - {'a': 1}
    + {'a': 2}
    """

    def __init__(self, *, settings: DiffSettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StructuralDiffer:
        """Build a differ using settings read from the environment."""

        from ...core import load_settings

        return cls(settings=load_settings(environ))

    @property
    def settings(self) -> DiffSettings:
        return self._settings

    def diff(self, want: object, got: object) -> str:
        """Return ``""`` when equal, otherwise the rendered difference listing."""

        if structurally_equal(want, got):
            return ""
        want_lines = self._render(want)
        got_lines = self._render(got)
        lines = [line for line in difflib.ndiff(want_lines, got_lines) if not line.startswith("? ")]
        if all(line.startswith("  ") for line in lines):
            # identical renderings; tell the values apart by type
            lines = [
                f"- {type(want).__name__}: {want!r}",
                f"+ {type(got).__name__}: {got!r}",
            ]
        if self._settings.context is not None:
            lines = list(_trim_context(lines, self._settings.context))
        return "\n".join(line.rstrip() for line in lines)

    def _render(self, value: object) -> list[str]:
        return pprint.pformat(_normalize(value), width=self._settings.width, sort_dicts=False).splitlines()


def structurally_equal(want: object, got: object) -> bool:
    """Return ``True`` when *want* and *got* are structurally identical.

    Examples
    --------
    >>> structurally_equal(None, None)
    True
    >>> structurally_equal([1, [2, 3]], [1, [2, 3]])
    True
    >>> structurally_equal((1, 2), [1, 2])
    False
    """

    return _equal(want, got, set())


def _equal(want: object, got: object, visited: set[tuple[int, int]]) -> bool:
    if want is got:
        return True
    if want is None or got is None:
        return False
    composite = (
        isinstance(want, (Mapping, list, tuple))
        or _is_dataclass_instance(want)
        or _is_plain_object(want)
    )
    if composite:
        # a pair already under comparison is assumed equal; cycles terminate
        pair = (id(want), id(got))
        if pair in visited:
            return True
        visited.add(pair)
    if isinstance(want, Mapping) and isinstance(got, Mapping):
        if want.keys() != got.keys():
            return False
        return all(_equal(want[key], got[key], visited) for key in want)
    if isinstance(want, (list, tuple)) and isinstance(got, (list, tuple)):
        if type(want) is not type(got) or len(want) != len(got):
            return False
        return all(_equal(w, g, visited) for w, g in zip(want, got))
    if _is_dataclass_instance(want) and _is_dataclass_instance(got):
        if type(want) is not type(got):
            return False
        return all(_equal(getattr(want, f.name), getattr(got, f.name), visited) for f in fields(want))
    if _is_plain_object(want) and _is_plain_object(got):
        if type(want) is not type(got):
            return False
        want_attrs, got_attrs = _attributes(want), _attributes(got)
        if want_attrs.keys() != got_attrs.keys():
            return False
        return all(_equal(want_attrs[name], got_attrs[name], visited) for name in want_attrs)
    return bool(want == got)


class _Struct:
    """Readable stand-in for plain objects whose ``repr`` carries an address."""

    __slots__ = ("name", "values")

    def __init__(self, name: str, values: dict[str, object]) -> None:
        self.name = name
        self.values = values

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={value!r}" for key, value in self.values.items())
        return f"{self.name}({inner})"


class _Cycle:
    """Placeholder for a container reached again while it is being rendered."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Recursion on {self.name}>"


def _normalize(value: object, active: frozenset[int] = frozenset()) -> object:
    if not isinstance(value, (Mapping, list, tuple)) and not _is_plain_object(value):
        return value
    if id(value) in active:
        return _Cycle(type(value).__name__)
    active = active | {id(value)}
    if isinstance(value, Mapping):
        return {key: _normalize(item, active) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize(item, active) for item in value]
    if isinstance(value, tuple):
        if type(value) is not tuple:
            return value
        return tuple(_normalize(item, active) for item in value)
    attrs = _attributes(value)
    return _Struct(type(value).__name__, {key: _normalize(item, active) for key, item in attrs.items()})


def _attributes(value: object) -> dict[str, object]:
    """Collect instance attributes from ``__dict__`` and ``__slots__`` across the MRO.

    Examples
    --------
    >>> class Pair:
    ...     __slots__ = ("left", "right")
    ...     def __init__(self):
    ...         self.left = 1
    >>> _attributes(Pair())
    {'left': 1}
    """

    attrs: dict[str, object] = dict(vars(value)) if hasattr(value, "__dict__") else {}
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in attrs and hasattr(value, name):
                attrs[name] = getattr(value, name)
    return attrs


def _has_slots(cls: type) -> bool:
    return any("__slots__" in klass.__dict__ for klass in cls.__mro__[:-1])


def _is_dataclass_instance(value: object) -> bool:
    return is_dataclass(value) and not isinstance(value, type)


def _is_plain_object(value: object) -> bool:
    cls = type(value)
    return (
        (hasattr(value, "__dict__") or _has_slots(cls))
        and cls.__eq__ is object.__eq__
        and not isinstance(value, type)
        and not callable(value)
        and not _is_dataclass_instance(value)
    )


def _trim_context(lines: list[str], context: int) -> Iterator[str]:
    """Yield changed lines plus *context* neighbours, marking skipped runs.

    Examples
    --------
    >>> list(_trim_context(["  a", "  b", "- c", "+ d", "  e"], 1))
    ['  ...', '  b', '- c', '+ d', '  e']
    """

    changed = [index for index, line in enumerate(lines) if not line.startswith("  ")]
    keep: set[int] = set()
    for index in changed:
        keep.update(range(max(0, index - context), min(len(lines), index + context + 1)))
    skipping = False
    for index, line in enumerate(lines):
        if index in keep:
            skipping = False
            yield line
        elif not skipping:
            skipping = True
            yield "  ..."
