import strawberry
from typing import Optional
from strawberry.types import Info
from todo_api.api.graphql.common.types import Node

@strawberry.type
class NodeQuery:
    @strawberry.field
    async def node(self, info: Info, id: strawberry.ID) -> Optional[Node]:
        """Fetch any object by its global ID."""
        from todo_api.api.graphql.nodes.resolvers import resolve_node
        return await resolve_node(info, id)
