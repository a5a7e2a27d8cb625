# Common module for shared Strawberry elements across features
from todo_api.api.graphql.common.connection import Connection, Edge, PageInfo, to_graphql_connection, to_graphql_edge
from todo_api.api.graphql.common.types import Node

__all__ = [
    'Connection', 'Edge', 'PageInfo', 'to_graphql_connection', 'to_graphql_edge',
    'Node',
]
