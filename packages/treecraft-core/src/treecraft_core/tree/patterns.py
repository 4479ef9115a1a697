"""Name-level pattern matching for filter and exclude options."""

from __future__ import annotations

from collections.abc import Sequence


def matches(name: str, patterns: Sequence[str]) -> bool:
    """Check whether *name* matches any of *patterns*.

    - no patterns: everything matches
    - ``*.ext``: names ending in ``.ext``
    - anything else: the exact name, or any name starting with it
      (``test`` matches ``test_file.js``; ``README.md`` also matches
      ``README.md.bak``)

    Matching is case-sensitive and only looks at the leaf name.
    """
    if not patterns:
        return True
    for pattern in patterns:
        if pattern.startswith("*."):
            if name.endswith(pattern[1:]):
                return True
        elif name == pattern or name.startswith(pattern):
            return True
    return False


def is_excluded(name: str, patterns: Sequence[str]) -> bool:
    """Exclude rule used while walking: exact name or suffix match."""
    return any(name == pattern or name.endswith(pattern) for pattern in patterns)


def parse_patterns(raw: str | None) -> list[str]:
    """Split a comma-separated option value into trimmed, non-empty patterns."""
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]
