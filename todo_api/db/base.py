from todo_api.core.config import get_settings
from todo_api.db.store import InMemoryTodoStore, TodoStore

settings = get_settings()


def create_store() -> TodoStore:
    """Build an empty store owned by the configured viewer."""
    return InMemoryTodoStore(viewer_id=settings.VIEWER_ID)
