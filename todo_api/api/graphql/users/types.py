from typing import Optional
import strawberry
from strawberry.types import Info
from todo_api.api.graphql.common.types import Node
from todo_api.api.graphql.todos.connection import TodoConnection

@strawberry.type
class User(Node):

    @strawberry.field
    async def todos(
        self,
        info: Info,
        status: str = "any",
        before: Optional[str] = None,
        after: Optional[str] = None,
        first: Optional[int] = None,
        last: Optional[int] = None
    ) -> Optional[TodoConnection]:
        """The viewer's todos in the order they were added."""
        from todo_api.api.graphql.users.resolvers import UserResolver
        return await UserResolver.get_todos_connection(
            info,
            status=status,
            before=before,
            after=after,
            first=first,
            last=last
        )
    
    @strawberry.field
    async def total_count(self, info: Info) -> Optional[int]:
        from todo_api.api.graphql.users.resolvers import UserResolver
        return await UserResolver.get_total_count(info)
    
    @strawberry.field
    async def completed_count(self, info: Info) -> Optional[int]:
        from todo_api.api.graphql.users.resolvers import UserResolver
        return await UserResolver.get_completed_count(info)
