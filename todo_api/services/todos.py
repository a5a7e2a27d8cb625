"""
Todo domain operations.

Each mutation is a plain function over a validated pydantic input and a
store handle. The registry below is what the GraphQL layer executes; nothing
here depends on the schema framework.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from todo_api.db.models import Todo, TodoStatus, User
from todo_api.db.store import TodoStore
from todo_api.services.relay import (
    NodeResolver,
    Connection,
    connection_from_list,
    cursor_for_object_in_connection,
    local_id_for,
    mutate_with_client_mutation_id,
    to_global_id,
)

logger = logging.getLogger(__name__)


# Domain inputs. The client mutation id never reaches these.
class DomainInput(BaseModel):
    model_config = ConfigDict(extra="forbid")


class AddTodo(DomainInput):
    text: StrictStr


class ChangeTodoStatus(DomainInput):
    id: StrictStr
    complete: StrictBool


class MarkAllTodos(DomainInput):
    complete: StrictBool


class RemoveCompletedTodos(DomainInput):
    pass


class RemoveTodo(DomainInput):
    id: StrictStr


class RenameTodo(DomainInput):
    id: StrictStr
    text: StrictStr


def _todo_local_id(global_id: str) -> Optional[str]:
    return local_id_for(global_id, Todo.type_name)


def _existing_todo_id(store: TodoStore, global_id: str) -> Optional[str]:
    """Local id of a stored todo, or None when the id names nothing we hold."""
    local_id = _todo_local_id(global_id)
    if local_id is None or store.get_todo(local_id) is None:
        logger.debug(f"Mutation target {global_id!r} not found")
        return None
    return local_id


def add_todo(data: AddTodo, store: TodoStore) -> Dict[str, Any]:
    return {"todo_id": store.add_todo(data.text, False)}


def change_todo_status(data: ChangeTodoStatus, store: TodoStore) -> Dict[str, Any]:
    todo_id = _existing_todo_id(store, data.id)
    if todo_id is not None:
        store.set_todo_complete(todo_id, data.complete)
    return {"todo_id": todo_id}


def mark_all_todos(data: MarkAllTodos, store: TodoStore) -> Dict[str, Any]:
    return {"todo_ids": store.mark_all_todos(data.complete)}


def remove_completed_todos(data: RemoveCompletedTodos, store: TodoStore) -> Dict[str, Any]:
    return {"todo_ids": store.remove_completed_todos()}


def remove_todo(data: RemoveTodo, store: TodoStore) -> Dict[str, Any]:
    todo_id = _existing_todo_id(store, data.id)
    if todo_id is not None:
        store.remove_todo(todo_id)
    return {"todo_id": todo_id}


def rename_todo(data: RenameTodo, store: TodoStore) -> Dict[str, Any]:
    todo_id = _existing_todo_id(store, data.id)
    if todo_id is not None:
        store.rename_todo(todo_id, data.text)
    return {"todo_id": todo_id}


@dataclass(frozen=True)
class MutationOperation:
    name: str
    input_model: Type[DomainInput]
    mutate: Callable[[Any, TodoStore], Dict[str, Any]]

    def run(self, fields: Mapping[str, Any], store: TodoStore) -> Dict[str, Any]:
        # Validation happens before the domain function sees anything
        data = self.input_model.model_validate(dict(fields))
        return self.mutate(data, store)


MUTATIONS: Dict[str, MutationOperation] = {
    operation.name: operation
    for operation in (
        MutationOperation("addTodo", AddTodo, add_todo),
        MutationOperation("changeTodoStatus", ChangeTodoStatus, change_todo_status),
        MutationOperation("markAllTodos", MarkAllTodos, mark_all_todos),
        MutationOperation("removeCompletedTodos", RemoveCompletedTodos, remove_completed_todos),
        MutationOperation("removeTodo", RemoveTodo, remove_todo),
        MutationOperation("renameTodo", RenameTodo, rename_todo),
    )
}


def execute_mutation(name: str, input: Mapping[str, Any], store: TodoStore) -> Dict[str, Any]:
    """
    Run a registered mutation through the client mutation id envelope.

    Args:
        name: Registered operation name, e.g. "addTodo"
        input: Domain fields plus an optional `client_mutation_id`
        store: The store to mutate

    Returns:
        The operation's result fields, plus `client_mutation_id` if one was given

    Raises:
        KeyError if no such operation is registered
        pydantic.ValidationError if the input is malformed
    """
    operation = MUTATIONS[name]
    logger.info(f"Executing mutation {name}")
    return mutate_with_client_mutation_id(partial(operation.run, store=store), input)


# Queries

def get_todos_connection(
    store: TodoStore,
    status: str = TodoStatus.ANY.value,
    before: Optional[str] = None,
    after: Optional[str] = None,
    first: Optional[int] = None,
    last: Optional[int] = None,
) -> Connection[Todo]:
    todos = store.list_todos(TodoStatus.parse(status))
    return connection_from_list(todos, before=before, after=after, first=first, last=last)


def get_todo_cursor(store: TodoStore, todo: Todo) -> Optional[str]:
    """Cursor of `todo` within the full, unfiltered todo list."""
    return cursor_for_object_in_connection(store.list_todos(TodoStatus.ANY), todo)


def get_total_count(store: TodoStore) -> int:
    return len(store.list_todos(TodoStatus.ANY))


def get_completed_count(store: TodoStore) -> int:
    return len(store.list_todos(TodoStatus.COMPLETED))


def get_todos_by_ids(store: TodoStore, todo_ids: List[str]) -> List[Todo]:
    todos = (store.get_todo(todo_id) for todo_id in todo_ids)
    return [todo for todo in todos if todo is not None]


def todo_global_ids(todo_ids: List[str]) -> List[str]:
    return [to_global_id(Todo.type_name, todo_id) for todo_id in todo_ids]


def build_node_resolver(store: TodoStore) -> NodeResolver:
    """Dispatch table for `node(id:)` lookups against one store."""
    resolver = NodeResolver()
    resolver.register(Todo.type_name, store.get_todo)
    resolver.register(User.type_name, store.get_user)
    return resolver
