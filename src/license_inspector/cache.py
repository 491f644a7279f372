"""In-memory cache for resolved license information.

Resolved license information is an immutable snapshot, so entries never need
to be updated. The cache is shared by all threads using a resolver and uses
relaxed compute-if-absent semantics: threads resolving the same identifier at
the same time may both compute a result, the first stored result is kept and
returned to both.
"""

import threading
from typing import Callable, Optional

from license_inspector.models import Identifier, ResolvedLicenseInfo


class ResolvedLicenseInfoCache:
    """Cache of resolved license information keyed by identifier.

    Single dictionary operations are atomic, so entries are stored without a
    lock. Only the hit and miss counters are updated under a lock.
    """

    def __init__(self) -> None:
        self._entries: dict[Identifier, ResolvedLicenseInfo] = {}
        self.hits = 0
        self.misses = 0
        self._stats_lock = threading.Lock()

    def get(self, id: Identifier) -> Optional[ResolvedLicenseInfo]:
        """Retrieve the cached information for an identifier.

        Args:
            id: Identifier of the package.

        Returns:
            The cached information, or None on a cache miss.
        """
        return self._entries.get(id)

    def get_or_compute(
        self, id: Identifier, compute: Callable[[Identifier], ResolvedLicenseInfo]
    ) -> ResolvedLicenseInfo:
        """Return the cached information, computing and storing it on a miss.

        Args:
            id: Identifier of the package.
            compute: Function computing the information; exceptions it raises
                propagate and nothing is stored.

        Returns:
            The stored information. If another thread stored a result while
            this one was computing, that result is returned.
        """
        cached = self._entries.get(id)
        if cached is not None:
            with self._stats_lock:
                self.hits += 1
            return cached

        with self._stats_lock:
            self.misses += 1
        return self._entries.setdefault(id, compute(id))

    def clear(self, id: Optional[Identifier] = None) -> None:
        """Clear cache entries.

        Args:
            id: If specified, clear only this identifier. If None, clear all
                entries.
        """
        if id is None:
            self._entries.clear()
        else:
            self._entries.pop(id, None)

    def info(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache information:
                - count: Number of cached entries
                - hits: Number of lookups answered from the cache
                - misses: Number of lookups that required a computation
        """
        with self._stats_lock:
            return {
                "count": len(self._entries),
                "hits": self.hits,
                "misses": self.misses,
            }

    def __contains__(self, id: object) -> bool:
        return id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
