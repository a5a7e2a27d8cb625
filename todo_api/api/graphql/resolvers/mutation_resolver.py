from typing import Any, Dict
from strawberry.types import Info

from todo_api.api.graphql.resolvers.base import BaseResolver, store_errors
from todo_api.api.graphql.todos.inputs import input_to_dict
from todo_api.services.todos import execute_mutation

async def resolve_mutation(info: Info, name: str, input: Any) -> Dict[str, Any]:
    """
    Run a registered todo mutation for a Strawberry input object.
    Returns the domain result with the client mutation id merged in.
    """
    store = BaseResolver.get_store_from_info(info)
    with store_errors(f"running {name}"):
        return execute_mutation(name, input_to_dict(input), store)
