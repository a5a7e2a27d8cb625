from typing import Optional, Callable, Any, Dict
from strawberry.types import Info

from todo_api.db.models import Todo as TodoModel, User as UserModel
from todo_api.api.graphql.common.types import Node
from todo_api.api.graphql.todos.resolvers import TodoResolver
from todo_api.api.graphql.users.resolvers import UserResolver
from todo_api.api.graphql.resolvers import BaseResolver, store_errors

# Node type tag -> converter to the matching GraphQL type
NODE_TYPES: Dict[str, Callable[[Any], Node]] = {
    TodoModel.type_name: TodoResolver.to_graphql_type,
    UserModel.type_name: UserResolver.to_graphql_type,
}

async def resolve_node(info: Info, id: str) -> Optional[Node]:
    """Resolver for the node query. Malformed or unknown IDs resolve to null."""
    nodes = BaseResolver.get_nodes_from_info(info)
    with store_errors("retrieving node"):
        node = nodes.resolve_node(id)
    if node is None:
        return None
    return NODE_TYPES[nodes.resolve_type(node)](node)
