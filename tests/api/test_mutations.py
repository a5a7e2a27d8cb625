from todo_api.services.relay import offset_to_cursor, to_global_id

ADD_TODO = """
mutation AddTodo($input: AddTodoInput!) {
  addTodo(input: $input) {
    clientMutationId
    todoEdge { cursor node { id text complete } }
    viewer { totalCount }
  }
}
"""

CHANGE_TODO_STATUS = """
mutation ChangeTodoStatus($input: ChangeTodoStatusInput!) {
  changeTodoStatus(input: $input) {
    clientMutationId
    todo { id complete }
    viewer { completedCount }
  }
}
"""

MARK_ALL_TODOS = """
mutation MarkAllTodos($input: MarkAllTodosInput!) {
  markAllTodos(input: $input) {
    clientMutationId
    changedTodos { id complete }
    viewer { completedCount }
  }
}
"""

REMOVE_COMPLETED_TODOS = """
mutation RemoveCompletedTodos($input: RemoveCompletedTodosInput!) {
  removeCompletedTodos(input: $input) {
    clientMutationId
    deletedTodoIds
    viewer { totalCount }
  }
}
"""

REMOVE_TODO = """
mutation RemoveTodo($input: RemoveTodoInput!) {
  removeTodo(input: $input) {
    clientMutationId
    deletedTodoId
    viewer { totalCount }
  }
}
"""

RENAME_TODO = """
mutation RenameTodo($input: RenameTodoInput!) {
  renameTodo(input: $input) {
    clientMutationId
    todo { id text }
    viewer { id }
  }
}
"""

def todo_gid(local_id):
    return to_global_id("Todo", local_id)

def test_add_todo(execute, seeded_store):
    """Adding "buy milk" returns its edge and bumps the total count"""
    result = execute(ADD_TODO, seeded_store, {"input": {"text": "buy milk", "clientMutationId": "abc"}})
    assert result.errors is None
    payload = result.data["addTodo"]
    assert payload["clientMutationId"] == "abc"
    assert payload["todoEdge"] == {
        "cursor": offset_to_cursor(5),
        "node": {"id": todo_gid("5"), "text": "buy milk", "complete": False},
    }
    assert payload["viewer"]["totalCount"] == 6

def test_client_mutation_id_is_null_when_omitted(execute, store):
    result = execute(ADD_TODO, store, {"input": {"text": "buy milk"}})
    assert result.errors is None
    assert result.data["addTodo"]["clientMutationId"] is None

def test_change_todo_status(execute, seeded_store):
    result = execute(CHANGE_TODO_STATUS, seeded_store, {
        "input": {"id": todo_gid("1"), "complete": True, "clientMutationId": "c1"}
    })
    payload = result.data["changeTodoStatus"]
    assert payload == {
        "clientMutationId": "c1",
        "todo": {"id": todo_gid("1"), "complete": True},
        "viewer": {"completedCount": 1},
    }

def test_change_todo_status_unknown_todo(execute, seeded_store):
    """Unknown targets succeed structurally with a null todo"""
    for global_id in (todo_gid("99"), to_global_id("User", "me"), "garbage"):
        result = execute(CHANGE_TODO_STATUS, seeded_store, {"input": {"id": global_id, "complete": True}})
        assert result.errors is None
        assert result.data["changeTodoStatus"]["todo"] is None
        assert result.data["changeTodoStatus"]["viewer"]["completedCount"] == 0

def test_mark_all_todos(execute, seeded_store):
    seeded_store.set_todo_complete("0", True)
    result = execute(MARK_ALL_TODOS, seeded_store, {"input": {"complete": True}})
    payload = result.data["markAllTodos"]
    assert [todo["id"] for todo in payload["changedTodos"]] == [todo_gid(i) for i in "1234"]
    assert all(todo["complete"] for todo in payload["changedTodos"])
    assert payload["viewer"]["completedCount"] == 5

def test_remove_completed_todos(execute, seeded_store):
    """Exactly the completed todos are removed and reported"""
    seeded_store.set_todo_complete("1", True)
    seeded_store.set_todo_complete("3", True)
    result = execute(REMOVE_COMPLETED_TODOS, seeded_store, {"input": {"clientMutationId": "rc"}})
    payload = result.data["removeCompletedTodos"]
    assert payload["clientMutationId"] == "rc"
    assert payload["deletedTodoIds"] == [todo_gid("1"), todo_gid("3")]
    assert payload["viewer"]["totalCount"] == 3
    assert [todo.id for todo in seeded_store.list_todos("any")] == ["0", "2", "4"]

def test_remove_todo(execute, seeded_store):
    result = execute(REMOVE_TODO, seeded_store, {"input": {"id": todo_gid("2")}})
    payload = result.data["removeTodo"]
    assert payload["deletedTodoId"] == todo_gid("2")
    assert payload["viewer"]["totalCount"] == 4

def test_remove_unknown_todo(execute, seeded_store):
    result = execute(REMOVE_TODO, seeded_store, {"input": {"id": todo_gid("99")}})
    assert result.errors is None
    assert result.data["removeTodo"]["deletedTodoId"] is None
    assert result.data["removeTodo"]["viewer"]["totalCount"] == 5

def test_rename_todo(execute, seeded_store):
    result = execute(RENAME_TODO, seeded_store, {"input": {"id": todo_gid("4"), "text": "renamed"}})
    payload = result.data["renameTodo"]
    assert payload["todo"] == {"id": todo_gid("4"), "text": "renamed"}
    assert payload["viewer"]["id"] == to_global_id("User", "me")

def test_missing_required_input_fails_before_mutating(execute, seeded_store):
    """Malformed input is rejected by the schema and nothing changes"""
    result = execute(RENAME_TODO, seeded_store, {"input": {"id": todo_gid("4")}})
    assert result.errors
    assert seeded_store.get_todo("4").text == "t4"
