"""
Pattern library: loads bundled patterns from YAML and exposes a read-only
lookup API.

The library is a module-level singleton; call get_library() to obtain it.
Patterns are loaded and validated once at import time. Nothing writes to
the library after startup.

──────────────────────────────────────────────────────────────────────────────
Stitch encoding
──────────────────────────────────────────────────────────────────────────────
Each stitch in a row list is either a bare string naming a fixed stitch
(``yo``, ``ssk``, ``skpo``) or a single-key mapping:

    {knit: 3}  {purl: 1}  {knit_together: 2}  {purl_together: 3}
    {group: {repeat: 2, stitches: [...]}}

Counts are checked by the stitch constructors, so a bad count surfaces as a
load-time error naming the pattern and row it came from.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from knitcount.schemas.pattern import Pattern, Row
from knitcount.schemas.stitch import (
    Group,
    Knit,
    KnitTogether,
    Purl,
    PurlTogether,
    SlipKnitPassOver,
    SlipSlipKnit,
    Stitch,
    YarnOver,
)

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_PATTERNS_FILE = "patterns.yaml"

_FIXED_STITCHES: dict[str, Callable[[], Stitch]] = {
    "yo": YarnOver,
    "ssk": SlipSlipKnit,
    "skpo": SlipKnitPassOver,
}

_COUNTED_STITCHES: dict[str, Callable[[int], Stitch]] = {
    "knit": Knit,
    "purl": Purl,
    "knit_together": KnitTogether,
    "purl_together": PurlTogether,
}


def stitch_from_data(entry: Any) -> Stitch:
    """
    Build a Stitch from its YAML form.

    Raises ValueError for unknown stitch names, malformed entries, or
    counts rejected by the stitch constructors.
    """
    if isinstance(entry, str):
        if entry not in _FIXED_STITCHES:
            raise ValueError(f"unknown stitch {entry!r}")
        return _FIXED_STITCHES[entry]()

    if not isinstance(entry, dict) or len(entry) != 1:
        raise ValueError(f"stitch must be a name or a single-key mapping, got {entry!r}")

    key, value = next(iter(entry.items()))
    if key == "group":
        if not isinstance(value, dict) or "repeat" not in value:
            raise ValueError(f"group needs a repeat and stitches, got {value!r}")
        return Group(
            repeat=_as_count(value["repeat"]),
            stitches=_stitches_from_data(value.get("stitches"), "group stitches"),
        )
    if key not in _COUNTED_STITCHES:
        raise ValueError(f"unknown stitch {key!r}")
    return _COUNTED_STITCHES[key](_as_count(value))


def row_from_data(entry: Any) -> Row:
    """Build a Row from a mapping with optional start, repetition and end lists."""
    if not isinstance(entry, dict):
        raise ValueError(f"row must be a mapping, got {entry!r}")
    unknown = set(entry) - {"start", "repetition", "end"}
    if unknown:
        raise ValueError(f"row has unknown keys: {sorted(map(str, unknown))}")
    return Row(
        start=_stitches_from_data(entry.get("start"), "start"),
        repetition=_stitches_from_data(entry.get("repetition"), "repetition"),
        end=_stitches_from_data(entry.get("end"), "end"),
    )


def _stitches_from_data(value: Any, section: str) -> tuple[Stitch, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{section} must be a list of stitches, got {value!r}")
    return tuple(stitch_from_data(s) for s in value)


def _as_count(value: Any) -> int:
    # bool is an int subclass; YAML "yes"/"no" would otherwise slip through.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"count must be an integer, got {value!r}")
    return value


class PatternLibrary:
    """
    Immutable collection of named patterns.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_library() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self._patterns: dict[str, Pattern] = {}
        self._load()
        logger.debug("Loaded %d patterns from %s", len(self._patterns), data_dir)

    def _load(self) -> None:
        """
        Read the patterns file. Raises ValueError listing every problem
        found, so corrupt data fails here and never at query time.
        """
        with open(self._data_dir / _PATTERNS_FILE) as f:
            data = yaml.safe_load(f) or {}

        errors: list[str] = []
        entries: Any = None
        if isinstance(data, dict):
            entries = data.get("patterns") or []
        if not isinstance(entries, list):
            errors.append("top level must be a mapping with a 'patterns' list")
            entries = []

        for index, entry in enumerate(entries):
            pattern_id = entry.get("id") if isinstance(entry, dict) else None
            if not pattern_id:
                errors.append(f"pattern #{index} has no id")
                continue
            if not isinstance(pattern_id, str):
                errors.append(f"pattern #{index} id must be a string, got {pattern_id!r}")
                continue
            if pattern_id in self._patterns:
                errors.append(f"duplicate pattern id {pattern_id!r}")
                continue

            row_entries = entry.get("rows") or []
            if not isinstance(row_entries, list):
                errors.append(
                    f"pattern {pattern_id!r} rows must be a list, got {row_entries!r}"
                )
                continue
            if not row_entries:
                errors.append(f"pattern {pattern_id!r} has no rows")
                continue

            rows: list[Row] = []
            for number, row_entry in enumerate(row_entries, start=1):
                try:
                    rows.append(row_from_data(row_entry))
                except ValueError as exc:
                    errors.append(f"pattern {pattern_id!r} row {number}: {exc}")

            self._patterns[pattern_id] = Pattern(
                name=entry.get("name") or pattern_id, rows=tuple(rows)
            )

        if errors:
            raise ValueError(
                "Pattern library validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, pattern_id: str) -> Pattern:
        """
        Return the pattern registered under ``pattern_id``.

        Raises:
            KeyError: if no such pattern exists.
        """
        if pattern_id not in self._patterns:
            raise KeyError(f"Unknown pattern: {pattern_id!r}")
        return self._patterns[pattern_id]

    def list_ids(self) -> list[str]:
        """Return a sorted list of all pattern ids."""
        return sorted(self._patterns)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built eagerly at import time. Patterns are immutable, so the library can be
# shared across threads without locking.

_library: PatternLibrary = PatternLibrary()


def get_library() -> PatternLibrary:
    """Return the module-level library singleton."""
    return _library
