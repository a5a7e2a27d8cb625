from fastapi.testclient import TestClient

from todo_api.db.store import InMemoryTodoStore
from todo_api.server import create_app

def test_graphql_endpoint_round_trip():
    """A mutation over HTTP is visible to a following query"""
    store = InMemoryTodoStore()
    client = TestClient(create_app(store))

    response = client.post("/graphql", json={
        "query": 'mutation { addTodo(input: {text: "buy milk", clientMutationId: "abc"}) { clientMutationId } }'
    })
    assert response.status_code == 200
    assert response.json()["data"]["addTodo"]["clientMutationId"] == "abc"

    response = client.post("/graphql", json={"query": "{ viewer { totalCount todos { edges { node { text } } } } }"})
    assert response.json()["data"]["viewer"] == {
        "totalCount": 1,
        "todos": {"edges": [{"node": {"text": "buy milk"}}]},
    }
    assert [todo.text for todo in store.list_todos()] == ["buy milk"]

def test_read_root():
    client = TestClient(create_app(InMemoryTodoStore()))
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()
