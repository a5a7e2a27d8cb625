from typing import Optional
from strawberry.types import Info

from todo_api.db.models import User as UserModel
from todo_api.api.graphql.users.types import User
from todo_api.api.graphql.todos.connection import TodoConnection
from todo_api.api.graphql.common.connection import to_graphql_connection
from todo_api.api.graphql.resolvers import BaseResolver, store_errors
from todo_api.services import todos as todo_service
from todo_api.services.relay import to_global_id

class UserResolver(BaseResolver[UserModel, User]):
    """Resolver for the viewer and its fields."""
    
    @classmethod
    def to_graphql_type(cls, model: UserModel) -> User:
        """Convert a User model to a GraphQL User type."""
        return User(id=to_global_id(UserModel.type_name, model.id))
    
    @classmethod
    async def get_viewer(cls, info: Info) -> User:
        """Get the single fixed viewer."""
        store = cls.get_store_from_info(info)
        with store_errors("retrieving viewer"):
            viewer = store.get_viewer()
        return cls.to_graphql_type(viewer)
    
    @classmethod
    async def get_todos_connection(
        cls,
        info: Info,
        status: str,
        before: Optional[str],
        after: Optional[str],
        first: Optional[int],
        last: Optional[int]
    ) -> TodoConnection:
        """Get a paginated connection of the viewer's todos."""
        from todo_api.api.graphql.todos.resolvers import TodoResolver
        store = cls.get_store_from_info(info)
        with store_errors("retrieving todos"):
            connection = todo_service.get_todos_connection(
                store,
                status=status,
                before=before,
                after=after,
                first=first,
                last=last
            )
        return to_graphql_connection(connection, TodoResolver.to_graphql_type)
    
    @classmethod
    async def get_total_count(cls, info: Info) -> int:
        store = cls.get_store_from_info(info)
        with store_errors("counting todos"):
            return todo_service.get_total_count(store)
    
    @classmethod
    async def get_completed_count(cls, info: Info) -> int:
        store = cls.get_store_from_info(info)
        with store_errors("counting completed todos"):
            return todo_service.get_completed_count(store)
