from typing import List, Optional
import strawberry
from strawberry.types import Info
from todo_api.api.graphql.todos.types import Todo
from todo_api.api.graphql.todos.connection import TodoEdge
from todo_api.api.graphql.users.types import User

@strawberry.type
class MutationPayload:
    """Fields every todo mutation returns."""
    client_mutation_id: Optional[str] = None
    
    @strawberry.field
    async def viewer(self, info: Info) -> Optional[User]:
        from todo_api.api.graphql.users.resolvers import UserResolver
        return await UserResolver.get_viewer(info)

@strawberry.type
class AddTodoPayload(MutationPayload):
    todo_id: strawberry.Private[Optional[str]] = None
    
    @strawberry.field
    async def todo_edge(self, info: Info) -> Optional[TodoEdge]:
        from todo_api.api.graphql.todos.resolvers import TodoResolver
        return await TodoResolver.get_todo_edge(self.todo_id, info)

@strawberry.type
class ChangeTodoStatusPayload(MutationPayload):
    todo_id: strawberry.Private[Optional[str]] = None
    
    @strawberry.field
    async def todo(self, info: Info) -> Optional[Todo]:
        from todo_api.api.graphql.todos.resolvers import TodoResolver
        return await TodoResolver.get_todo(self.todo_id, info)

@strawberry.type
class MarkAllTodosPayload(MutationPayload):
    todo_ids: strawberry.Private[Optional[List[str]]] = None
    
    @strawberry.field
    async def changed_todos(self, info: Info) -> Optional[List[Todo]]:
        from todo_api.api.graphql.todos.resolvers import TodoResolver
        return await TodoResolver.get_todos(self.todo_ids or [], info)

@strawberry.type
class RemoveCompletedTodosPayload(MutationPayload):
    deleted_todo_ids: Optional[List[strawberry.ID]] = None

@strawberry.type
class RemoveTodoPayload(MutationPayload):
    deleted_todo_id: Optional[strawberry.ID] = None

@strawberry.type
class RenameTodoPayload(MutationPayload):
    todo_id: strawberry.Private[Optional[str]] = None
    
    @strawberry.field
    async def todo(self, info: Info) -> Optional[Todo]:
        from todo_api.api.graphql.todos.resolvers import TodoResolver
        return await TodoResolver.get_todo(self.todo_id, info)
