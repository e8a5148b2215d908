"""Environment variable adapter.

Purpose
-------
Translate process environment variables into the nested mapping from which
:func:`fluentassert.core.load_settings` builds
:class:`~fluentassert.domain.settings.DiffSettings`.

Key behaviours
--------------
* Enforces a prefix (``default_env_prefix``) so only relevant keys are captured.
* Supports ``__`` as a nesting delimiter (``DIFF__WIDTH`` → ``{"diff": {"width": ...}}``).
* Performs light type coercion for common scalar types (bools, ints, floats,
  ``null``/``none``).
* Emits structured logging via :mod:`fluentassert.observability`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from ...observability import log_debug


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('fluentassert')
    'FLUENTASSERT'
    >>> default_env_prefix('fluent-assert')
    'FLUENT_ASSERT'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the settings namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str) -> dict[str, object]:
        """Return a nested mapping containing variables with the supplied *prefix*.

        Parameters
        ----------
        prefix:
            Prefix filter (upper-case). The loader appends ``_`` if missing.

        Returns
        -------
        dict[str, object]
            Nested mapping with lower-cased keys and coerced scalar values.

        Examples
        --------
        >>> loader = DefaultEnvLoader(environ={'DEMO_DIFF__WIDTH': '100', 'OTHER': 'x'})
        >>> loader.load('DEMO')
        {'diff': {'width': 100}}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in self._environ.items():
            if prefix and not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :] if prefix else key
            if not stripped:
                continue
            assign_nested(collected, stripped, _coerce(value))
        log_debug("env_variables_loaded", prefix=prefix, keys=sorted(collected.keys()))
        return collected


def assign_nested(target: dict[str, object], key: str, value: object) -> None:
    """Assign ``value`` inside ``target`` using ``__`` as a nesting delimiter.

    Examples
    --------
    >>> data: dict[str, object] = {}
    >>> assign_nested(data, 'DIFF__CONTEXT', 3)
    >>> data
    {'diff': {'context': 3}}
    """

    parts = key.split("__")
    cursor = target
    for part in parts[:-1]:
        cursor = _ensure_child_mapping(cursor, part)
    cursor[parts[-1].lower()] = value


def _ensure_child_mapping(mapping: dict[str, object], key: str) -> dict[str, object]:
    """Ensure ``mapping[key]`` is a ``dict`` (creating or validating as necessary)."""

    resolved = key.lower()
    child = mapping.setdefault(resolved, {})
    if not isinstance(child, dict):
        raise ValueError(f"Cannot override scalar with mapping for key {key}")
    return child


def _coerce(value: str) -> object:
    """Coerce textual environment values to Python primitives where possible.

    Examples
    --------
    >>> _coerce('true'), _coerce('10'), _coerce('3.5'), _coerce('none'), _coerce('wide')
    (True, 10, 3.5, None, 'wide')
    """

    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
            return int(value)
        return float(value)
    except ValueError:
        return value
