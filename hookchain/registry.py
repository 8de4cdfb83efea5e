"""Registry for hook management.

This module provides HookRegistry, mapping event names to priority tables.
Each PriorityTable keeps an explicitly sorted index of its priorities so
that iteration is ascending regardless of insertion order.
"""

from bisect import insort
from typing import Any

from hookchain.exceptions import PriorityOrderError


class PriorityTable[CB]:
    """Callbacks of one event, bucketed by priority.

    Buckets are ordered by ascending priority; callbacks inside a bucket
    keep their registration order.
    """

    def __init__(self) -> None:
        """Initialize empty table.

        Post:
            _priorities is an empty sorted list, _buckets an empty dict.
        """
        self._priorities: list[Any] = []
        self._buckets: dict[Any, list[CB]] = {}

    def add(self, priority: Any, callback: CB) -> None:
        """Append a callback to the bucket for *priority*.

        Args:
            priority: Bucket key; must be hashable and comparable with the
                priorities already in the table.
            callback: Callback to append.

        Post:
            Bucket created (and its key inserted in sorted position) on
            first use; callback appended to its end.

        Raises:
            PriorityOrderError: If *priority* cannot be hashed or ordered
                against existing priorities.  The table is unchanged.
        """
        try:
            bucket = self._buckets.get(priority)
        except TypeError as exc:
            raise PriorityOrderError(
                f"priority {priority!r} is not hashable"
            ) from exc

        if bucket is None:
            try:
                insort(self._priorities, priority)
            except TypeError as exc:
                raise PriorityOrderError(
                    f"priority {priority!r} cannot be ordered against "
                    f"{self._priorities!r}"
                ) from exc
            bucket = self._buckets[priority] = []

        bucket.append(callback)

    def check(self, priorities: list[Any]) -> None:
        """Verify *priorities* could all be added without error.

        Raises:
            PriorityOrderError: If one of them cannot be hashed, or the
                new and existing priorities cannot be ordered together.
        """
        for priority in priorities:
            try:
                hash(priority)
            except TypeError as exc:
                raise PriorityOrderError(
                    f"priority {priority!r} is not hashable"
                ) from exc
        try:
            sorted([*self._priorities, *priorities])
        except TypeError as exc:
            raise PriorityOrderError(
                f"priorities {priorities!r} cannot be ordered against "
                f"{self._priorities!r}"
            ) from exc

    @property
    def priorities(self) -> list[Any]:
        """Priorities in ascending order."""
        return list(self._priorities)

    def layers(self) -> list[list[CB]]:
        """Return a snapshot of every bucket in ascending priority order."""
        return [list(self._buckets[p]) for p in self._priorities]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())


class HookRegistry[CB]:
    """Registry table for event hooks.

    Tables are created lazily on first registration for an event name and
    are never removed.
    """

    def __init__(self) -> None:
        self._tables: dict[str, PriorityTable[CB]] = {}

    def add(self, event_name: str, callback: CB, priority: Any) -> None:
        """Register a callback for an event at a resolved priority.

        Args:
            event_name: Event to register for.
            callback: Callback function.
            priority: Already-resolved priority.

        Raises:
            PriorityOrderError: If *priority* cannot be ordered against the
                event's existing priorities.
        """
        self.add_all(event_name, [(priority, callback)])

    def add_all(self, event_name: str, entries: list[tuple[Any, CB]]) -> None:
        """Register several ``(priority, callback)`` pairs, all or none.

        Every priority is checked against the event's table before the
        first callback is stored.

        Raises:
            PriorityOrderError: If any priority cannot be hashed or ordered
                against the others.  The registry is unchanged.
        """
        if not entries:
            return
        table = self._tables.get(event_name)
        if table is None:
            table = PriorityTable[CB]()
        table.check([priority for priority, _ in entries])

        for priority, callback in entries:
            table.add(priority, callback)
        self._tables.setdefault(event_name, table)

    def exec_order(self, event_name: str) -> list[list[CB]]:
        """Return execution order for an event.

        Args:
            event_name: Event to resolve.

        Returns:
            2D list of callbacks, one inner list per priority, ascending.
            Empty when nothing is registered.  The lists are copies, so
            later registrations do not affect a returned plan.
        """
        table = self._tables.get(event_name)
        if table is None:
            return []
        return table.layers()

    def priorities(self, event_name: str) -> list[Any]:
        """Return the ascending priorities registered for *event_name*."""
        table = self._tables.get(event_name)
        if table is None:
            return []
        return table.priorities

    def events(self) -> list[str]:
        """Return event names with at least one callback, in first-use order."""
        return list(self._tables)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._tables
