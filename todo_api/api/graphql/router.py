from typing import Any, Dict, Optional

from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from todo_api.api.graphql.schema import schema
from todo_api.db.store import TodoStore
from todo_api.services.todos import build_node_resolver

def build_context(store: TodoStore, request: Optional[Request] = None) -> Dict[str, Any]:
    """
    Creates a context for GraphQL resolvers with the request, the todo store
    and the node dispatch table for that store.
    """
    return {
        "request": request,
        "store": store,
        "nodes": build_node_resolver(store)
    }

def create_graphql_router(store: TodoStore, graphiql: bool = True) -> GraphQLRouter:
    """Create a GraphQL router for FastAPI serving `store`."""
    context = build_context(store)

    async def get_context(request: Request) -> Dict[str, Any]:
        return {**context, "request": request}

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None
    )
