import strawberry
from typing import Optional
from strawberry.types import Info
from todo_api.api.graphql.users.types import User

@strawberry.type
class UserQuery:
    @strawberry.field
    async def viewer(self, info: Info) -> Optional[User]:
        from todo_api.api.graphql.users.resolvers import UserResolver
        return await UserResolver.get_viewer(info)
