# store.py
import logging
from typing import Callable, Iterator, List, Optional, Tuple

from models import Habit

logger = logging.getLogger(__name__)

Listener = Callable[[Tuple[Habit, ...]], None]


class HabitStore:
    """In-memory ordered list of habits.

    Habits are addressed by their current position. Out-of-range positions
    are ignored rather than raised, so toggle/delete return False instead.
    """

    def __init__(self):
        self._habits: List[Habit] = []
        self._next_id = 1
        self._listeners: List[Listener] = []

    # -------- Reads --------
    def list(self) -> Tuple[Habit, ...]:
        return tuple(self._habits)

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self) -> Iterator[Habit]:
        return iter(self.list())

    # -------- Mutations --------
    def add(self, name: str) -> Optional[Habit]:
        if not name or not name.strip():
            logger.debug("Ignoring blank habit name %r", name)
            return None
        habit = Habit(name=name, completed=False, id=self._next_id)
        self._next_id += 1
        self._habits.append(habit)
        logger.info("Added habit %d %r", habit.id, habit.name)
        self._notify()
        return habit

    def toggle(self, index: int) -> bool:
        if not self._in_range(index):
            logger.debug("Ignoring toggle of out-of-range index %r", index)
            return False
        # replace by value, never mutate the old snapshot
        self._habits = [
            h.toggled() if i == index else h for i, h in enumerate(self._habits)
        ]
        habit = self._habits[index]
        logger.info("Habit %d %r completed=%s", habit.id, habit.name, habit.completed)
        self._notify()
        return True

    def delete(self, index: int) -> bool:
        if not self._in_range(index):
            logger.debug("Ignoring delete of out-of-range index %r", index)
            return False
        removed = self._habits[index]
        self._habits = [h for i, h in enumerate(self._habits) if i != index]
        logger.info("Deleted habit %d %r", removed.id, removed.name)
        self._notify()
        return True

    # -------- Observers --------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(snapshot)` after every successful mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        snapshot = self.list()
        for listener in list(self._listeners):
            listener(snapshot)

    def _in_range(self, index) -> bool:
        # bool is an int subclass; True must not mean position 1
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._habits)
