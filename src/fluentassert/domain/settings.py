"""Domain value object describing how structural diffs are rendered.

Contents
--------
* :class:`DiffSettings` – frozen rendering options consumed by the differ.
* :data:`DEFAULT_SETTINGS` – canonical instance used when nothing is configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class DiffSettings:
    """Rendering options for the structural differ.

    Attributes
    ----------
    width:
        Line width handed to :func:`pprint.pformat` when rendering values.
    context:
        Number of unchanged lines kept around each change. ``None`` keeps the
        full listing.

    Examples
    --------
    >>> DiffSettings()
    DiffSettings(width=80, context=None)
    >>> DiffSettings(width=40, context=1).context
    1
    """

    width: int = 80
    context: int | None = None


DEFAULT_SETTINGS: Final[DiffSettings] = DiffSettings()
