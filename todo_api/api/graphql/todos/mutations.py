from typing import Optional
import strawberry
from strawberry.types import Info
from todo_api.api.graphql.todos.inputs import (
    AddTodoInput,
    ChangeTodoStatusInput,
    MarkAllTodosInput,
    RemoveCompletedTodosInput,
    RemoveTodoInput,
    RenameTodoInput
)
from todo_api.api.graphql.todos.payloads import (
    AddTodoPayload,
    ChangeTodoStatusPayload,
    MarkAllTodosPayload,
    RemoveCompletedTodosPayload,
    RemoveTodoPayload,
    RenameTodoPayload
)
from todo_api.db.models import Todo as TodoModel
from todo_api.services.relay import CLIENT_MUTATION_ID, to_global_id

@strawberry.type
class TodoMutation:
    @strawberry.mutation
    async def add_todo(self, info: Info, input: AddTodoInput) -> Optional[AddTodoPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        result = await resolve_mutation(info, "addTodo", input)
        return AddTodoPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            todo_id=result["todo_id"]
        )
    
    @strawberry.mutation
    async def change_todo_status(self, info: Info, input: ChangeTodoStatusInput) -> Optional[ChangeTodoStatusPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        result = await resolve_mutation(info, "changeTodoStatus", input)
        return ChangeTodoStatusPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            todo_id=result["todo_id"]
        )
    
    @strawberry.mutation
    async def mark_all_todos(self, info: Info, input: MarkAllTodosInput) -> Optional[MarkAllTodosPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        result = await resolve_mutation(info, "markAllTodos", input)
        return MarkAllTodosPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            todo_ids=result["todo_ids"]
        )
    
    @strawberry.mutation
    async def remove_completed_todos(
        self, 
        info: Info, 
        input: Optional[RemoveCompletedTodosInput] = None
    ) -> Optional[RemoveCompletedTodosPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        from todo_api.services.todos import todo_global_ids
        result = await resolve_mutation(info, "removeCompletedTodos", input or RemoveCompletedTodosInput())
        return RemoveCompletedTodosPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            deleted_todo_ids=todo_global_ids(result["todo_ids"])
        )
    
    @strawberry.mutation
    async def remove_todo(self, info: Info, input: RemoveTodoInput) -> Optional[RemoveTodoPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        result = await resolve_mutation(info, "removeTodo", input)
        todo_id = result["todo_id"]
        return RemoveTodoPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            deleted_todo_id=to_global_id(TodoModel.type_name, todo_id) if todo_id is not None else None
        )
    
    @strawberry.mutation
    async def rename_todo(self, info: Info, input: RenameTodoInput) -> Optional[RenameTodoPayload]:
        from todo_api.api.graphql.resolvers.mutation_resolver import resolve_mutation
        result = await resolve_mutation(info, "renameTodo", input)
        return RenameTodoPayload(
            client_mutation_id=result.get(CLIENT_MUTATION_ID),
            todo_id=result["todo_id"]
        )
