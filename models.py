# models.py
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Habit:
    name: str
    completed: bool = False
    id: int = 0   # assigned by the store, stable for the session

    def toggled(self) -> "Habit":
        return replace(self, completed=not self.completed)
