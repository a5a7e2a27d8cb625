from typing import List, Optional
from strawberry.types import Info

from todo_api.db.models import Todo as TodoModel
from todo_api.api.graphql.todos.types import Todo
from todo_api.api.graphql.todos.connection import TodoEdge
from todo_api.api.graphql.common.connection import Edge
from todo_api.api.graphql.resolvers import BaseResolver, store_errors
from todo_api.services import todos as todo_service
from todo_api.services.relay import to_global_id

class TodoResolver(BaseResolver[TodoModel, Todo]):
    """Resolver for Todo-related operations."""
    
    @classmethod
    def to_graphql_type(cls, model: TodoModel) -> Todo:
        """Convert a Todo model to a GraphQL Todo type."""
        return Todo(
            id=to_global_id(TodoModel.type_name, model.id),
            text=model.text,
            complete=model.complete
        )
    
    @classmethod
    async def get_todo(cls, todo_id: Optional[str], info: Info) -> Optional[Todo]:
        """Get a todo by local ID. A missing ID or todo gives None."""
        if todo_id is None:
            return None
        store = cls.get_store_from_info(info)
        with store_errors("retrieving todo"):
            todo = store.get_todo(todo_id)
        if not todo:
            return None
        return cls.to_graphql_type(todo)
    
    @classmethod
    async def get_todos(cls, todo_ids: List[str], info: Info) -> List[Todo]:
        """Get the todos that still exist among `todo_ids`, in that order."""
        store = cls.get_store_from_info(info)
        with store_errors("retrieving todos"):
            todos = todo_service.get_todos_by_ids(store, todo_ids)
        return [cls.to_graphql_type(todo) for todo in todos]
    
    @classmethod
    async def get_todo_edge(cls, todo_id: Optional[str], info: Info) -> Optional[TodoEdge]:
        """Edge for a todo, with its cursor in the full todo list."""
        if todo_id is None:
            return None
        store = cls.get_store_from_info(info)
        with store_errors("retrieving todo edge"):
            todo = store.get_todo(todo_id)
            if not todo:
                return None
            cursor = todo_service.get_todo_cursor(store, todo)
        if cursor is None:
            return None
        return Edge(node=cls.to_graphql_type(todo), cursor=cursor)
