from typing import TypeVar, Generic, List, Optional, Callable, Any
import strawberry

from todo_api.services import relay

T = TypeVar('T')  # Type for the node in the connection

@strawberry.type
class PageInfo:
    """Information about pagination in a connection."""
    has_next_page: bool
    has_previous_page: bool
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None

@strawberry.type
class Edge(Generic[T]):
    """An edge in a connection."""
    node: T
    cursor: str

@strawberry.type
class Connection(Generic[T]):
    """A connection to a list of items."""
    edges: List[Edge[T]]
    page_info: PageInfo

def to_graphql_edge(edge: relay.Edge, convert: Callable[[Any], T]) -> Edge[T]:
    """Convert a domain edge, mapping its node through `convert`."""
    return Edge(node=convert(edge.node), cursor=edge.cursor)

def to_graphql_connection(connection: relay.Connection, convert: Callable[[Any], T]) -> Connection[T]:
    """Convert a domain connection, mapping every node through `convert`."""
    page_info = connection.page_info
    return Connection(
        edges=[to_graphql_edge(edge, convert) for edge in connection.edges],
        page_info=PageInfo(
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor
        )
    )
