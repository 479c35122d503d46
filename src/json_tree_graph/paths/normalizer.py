"""Path normalization: canonicalizes JSON-path strings for comparison.

Processing pipeline (applied in order):
1. Strip surrounding whitespace (U+FEFF counts as whitespace).
2. Prefix ``"$."`` unless the path already starts with ``$``.
3. Collapse runs of dots into one dot (``a..b`` -> ``a.b``).
4. Drop a dot directly before a bracket (``a.[0]`` -> ``a[0]``).

Bracketed indices pass through unchanged.  The pipeline is total and
idempotent; an empty string becomes ``"$."``.
"""

from __future__ import annotations

import re

from cachetools import LRUCache

# Matches leading or trailing whitespace, including the byte-order mark
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

# Matches a run of two or more dots
_DOT_RUN = re.compile(r"\.{2,}")

# Matches a dot immediately before an opening bracket
_DOT_BRACKET = re.compile(r"\.\[")


def normalize_path(path: str) -> str:
    """Return the canonical form of ``path``.

    Example::

        normalize_path("user..name")        # "$.user.name"
        normalize_path("  $.user.name  ")   # "$.user.name"
        normalize_path("user.[0].name")     # "$.user[0].name"
    """
    normalized = _EDGE_SPACE.sub("", path)
    if not normalized.startswith("$"):
        normalized = "$." + normalized
    normalized = _DOT_RUN.sub(".", normalized)
    return _DOT_BRACKET.sub("[", normalized)


class PathNormalizer:
    """LRU-memoized ``normalize_path``.

    A matcher normalizes every node path on every search; for a tree that is
    searched repeatedly the node paths are served from memory.  PathMatcher
    calls ``reserve`` so a whole node list (plus the query) fits without
    evicting itself.  Each instance owns its own ``LRUCache``.

    Args:
        max_size: Initial maximum number of normalized paths held.  Defaults
            to 1024.  The least-recently-used entry is dropped when exceeded.
    """

    def __init__(self, max_size: int = 1024) -> None:
        self._cache: LRUCache[str, str] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def reserve(self, size: int) -> None:
        """Grow the cache to hold at least ``size`` entries, keeping its contents."""
        if size <= self._cache.maxsize:
            return
        grown: LRUCache[str, str] = LRUCache(maxsize=size)
        grown.update(self._cache)
        self._cache = grown

    def normalize(self, path: str) -> str:
        cached = self._cache.get(path)
        if cached is None:
            cached = normalize_path(path)
            self._cache[path] = cached
        return cached
