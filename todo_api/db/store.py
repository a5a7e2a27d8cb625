import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, List, Optional, Union

from todo_api.db.models import Todo, TodoStatus, User

logger = logging.getLogger(__name__)


class TodoStore(ABC):
    """Abstract base class for the todo store consumed by the API layer."""

    @abstractmethod
    def get_todo(self, id: str) -> Optional[Todo]:
        """Get a todo by local id, or None if it does not exist."""
        pass

    @abstractmethod
    def list_todos(self, status: Union[TodoStatus, str] = TodoStatus.ANY) -> List[Todo]:
        """
        List the viewer's todos in insertion order.

        Args:
            status: "any", "completed" or "incomplete"

        Returns:
            The matching todos, oldest first
        """
        pass

    @abstractmethod
    def get_viewer(self) -> User:
        """Get the single fixed viewer."""
        pass

    @abstractmethod
    def get_user(self, id: str) -> Optional[User]:
        """Get a user by local id."""
        pass

    @abstractmethod
    def add_todo(self, text: str, complete: bool = False) -> str:
        """Create a todo and return its freshly assigned local id."""
        pass

    @abstractmethod
    def rename_todo(self, id: str, text: str) -> None:
        """Change the text of a todo. Unknown ids are ignored."""
        pass

    @abstractmethod
    def set_todo_complete(self, id: str, complete: bool) -> None:
        """Change the status of a todo. Unknown ids are ignored."""
        pass

    @abstractmethod
    def mark_all_todos(self, complete: bool) -> List[str]:
        """Set every todo's status and return the ids that actually changed."""
        pass

    @abstractmethod
    def remove_todo(self, id: str) -> None:
        """Delete a todo. Unknown ids are ignored."""
        pass

    @abstractmethod
    def remove_completed_todos(self) -> List[str]:
        """Delete every completed todo and return the removed ids."""
        pass


class InMemoryTodoStore(TodoStore):
    """
    Keyed-map todo store for a single viewer.

    All access goes through one re-entrant lock. Reads hand out copies so
    callers can work on a snapshot without holding the lock.
    """

    def __init__(self, viewer_id: str = "me"):
        self._lock = threading.RLock()
        self._viewer = User(id=viewer_id)
        self._users_by_id: Dict[str, User] = {viewer_id: self._viewer}
        self._todos_by_id: Dict[str, Todo] = {}
        self._todo_ids: List[str] = []
        self._next_todo_id = 0

    def get_todo(self, id: str) -> Optional[Todo]:
        with self._lock:
            todo = self._todos_by_id.get(id)
            return replace(todo) if todo else None

    def list_todos(self, status: Union[TodoStatus, str] = TodoStatus.ANY) -> List[Todo]:
        status = TodoStatus.parse(status)
        with self._lock:
            todos = [self._todos_by_id[todo_id] for todo_id in self._todo_ids]
            return [replace(todo) for todo in todos if status.matches(todo)]

    def get_viewer(self) -> User:
        return self._viewer

    def get_user(self, id: str) -> Optional[User]:
        return self._users_by_id.get(id)

    def add_todo(self, text: str, complete: bool = False) -> str:
        with self._lock:
            todo = Todo(id=str(self._next_todo_id), text=text, complete=complete)
            self._next_todo_id += 1
            self._todos_by_id[todo.id] = todo
            self._todo_ids.append(todo.id)
        logger.info(f"Added todo {todo.id}")
        return todo.id

    def rename_todo(self, id: str, text: str) -> None:
        with self._lock:
            todo = self._todos_by_id.get(id)
            if todo is None:
                return
            todo.text = text
        logger.info(f"Renamed todo {id}")

    def set_todo_complete(self, id: str, complete: bool) -> None:
        with self._lock:
            todo = self._todos_by_id.get(id)
            if todo is None:
                return
            todo.complete = complete
        logger.info(f"Set todo {id} complete={complete}")

    def mark_all_todos(self, complete: bool) -> List[str]:
        changed_ids = []
        with self._lock:
            for todo_id in self._todo_ids:
                todo = self._todos_by_id[todo_id]
                if todo.complete != complete:
                    todo.complete = complete
                    changed_ids.append(todo_id)
        logger.info(f"Marked {len(changed_ids)} todos complete={complete}")
        return changed_ids

    def remove_todo(self, id: str) -> None:
        with self._lock:
            if self._todos_by_id.pop(id, None) is None:
                return
            self._todo_ids.remove(id)
        logger.info(f"Removed todo {id}")

    def remove_completed_todos(self) -> List[str]:
        with self._lock:
            removed_ids = [
                todo_id for todo_id in self._todo_ids
                if self._todos_by_id[todo_id].complete
            ]
            for todo_id in removed_ids:
                del self._todos_by_id[todo_id]
            removed = set(removed_ids)
            self._todo_ids = [todo_id for todo_id in self._todo_ids if todo_id not in removed]
        logger.info(f"Removed {len(removed_ids)} completed todos")
        return removed_ids
