from typing import Union

from todo_api.db.models.todo import Todo, TodoStatus
from todo_api.db.models.user import User

# Every object reachable through `node(id:)`
Node = Union[Todo, User]

__all__ = ['Node', 'Todo', 'TodoStatus', 'User']
