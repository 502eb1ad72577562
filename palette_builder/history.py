"""Bounded linear undo/redo history."""

from typing import Generic, TypeVar

from . import config

T = TypeVar("T")

_CURRENT = object()


class HistoryManager(Generic[T]):
    """Versioned sequence of snapshots with a cursor.

    ``commit`` is the only way to add a state: it drops any redo branch,
    appends the new state and moves the cursor to it. When more than
    ``capacity`` snapshots are held the oldest is evicted, which never changes
    ``current()``. Snapshots are stored as given and never edited in place, so
    callers should commit immutable values (tuples, namedtuples).

    Not thread-safe: a manager belongs to a single editing session.
    """

    def __init__(self, initial: T, capacity: int = config.HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._snapshots = [initial]
        self._cursor = 0

    def __len__(self):
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> tuple:
        return tuple(self._snapshots)

    def current(self) -> T:
        return self._snapshots[self._cursor]

    def commit(self, state: T) -> None:
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(state)
        if len(self._snapshots) > self.capacity:
            del self._snapshots[0]
        self._cursor = len(self._snapshots) - 1

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def undo(self) -> bool:
        """Step back one snapshot. Returns False when already at the oldest."""
        if not self.can_undo():
            return False
        self._cursor -= 1
        return True

    def redo(self) -> bool:
        """Step forward one snapshot. Returns False when already at the newest."""
        if not self.can_redo():
            return False
        self._cursor += 1
        return True

    def reset(self, state=_CURRENT) -> None:
        """Collapse history to a single snapshot.

        The kept snapshot is the current state, or ``state`` when given.
        """
        if state is _CURRENT:
            state = self.current()
        self._snapshots = [state]
        self._cursor = 0
