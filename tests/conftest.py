import asyncio
import pytest

from todo_api.api.graphql.router import build_context
from todo_api.api.graphql.schema import schema
from todo_api.db.store import InMemoryTodoStore

@pytest.fixture
def store():
    """An empty store for each test"""
    return InMemoryTodoStore(viewer_id="me")

@pytest.fixture
def seeded_store(store):
    """Five incomplete todos t0..t4 in insertion order, local ids "0".."4" """
    for i in range(5):
        store.add_todo(f"t{i}", False)
    return store

@pytest.fixture
def execute():
    """Run a GraphQL document against the schema with a given store"""
    def _execute(query, store, variables=None):
        return asyncio.run(
            schema.execute(query, variable_values=variables, context_value=build_context(store))
        )
    return _execute
