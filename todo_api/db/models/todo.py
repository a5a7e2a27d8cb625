from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TodoStatus(str, Enum):
    ANY = "any"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    @classmethod
    def parse(cls, value) -> "TodoStatus":
        """Unrecognised statuses select every todo."""
        try:
            return cls(value)
        except ValueError:
            return cls.ANY

    def matches(self, todo: "Todo") -> bool:
        if self is TodoStatus.COMPLETED:
            return todo.complete
        if self is TodoStatus.INCOMPLETE:
            return not todo.complete
        return True


@dataclass
class Todo:
    type_name: ClassVar[str] = "Todo"

    id: str
    text: str
    complete: bool = False
