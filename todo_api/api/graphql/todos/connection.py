from todo_api.api.graphql.todos.types import Todo
from todo_api.api.graphql.common.connection import Connection, Edge, PageInfo

# Type aliases for Todo connections
TodoEdge = Edge[Todo]
TodoConnection = Connection[Todo]

__all__ = ['TodoEdge', 'TodoConnection', 'PageInfo']
