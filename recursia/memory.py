"""Bookkeeping of allocations and releases per tracked type name."""

from __future__ import annotations

from collections import Counter


class AllocationTracker:
    """Counts creations and deletions of registered types to spot imbalances."""

    def __init__(self) -> None:
        self._registered: set[str] = set()
        self._counts: Counter[str] = Counter()

    def register(self, name: str) -> None:
        """Start reporting imbalances for the named type."""
        self._registered.add(name)

    def record_new(self, name: str) -> None:
        """Note that one object of the named type was created."""
        self._counts[name] += 1

    def record_delete(self, name: str) -> None:
        """Note that one object of the named type was released."""
        self._counts[name] -= 1

    def clear(self) -> None:
        """Forget all allocation records, keeping registrations."""
        self._counts.clear()

    def types_with_errors(self) -> dict[str, int]:
        """Map each registered type whose count is not zero to that count, sorted by name."""
        return {
            name: self._counts[name]
            for name in sorted(self._registered)
            if self._counts[name] != 0
        }