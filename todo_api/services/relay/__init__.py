# Relay conventions: global ids, connections, node lookup and mutation envelopes
from todo_api.services.relay.connection import (
    Connection,
    Edge,
    PageInfo,
    connection_from_list,
    cursor_for_object_in_connection,
    cursor_to_offset,
    offset_to_cursor,
)
from todo_api.services.relay.global_id import GlobalId, from_global_id, local_id_for, to_global_id
from todo_api.services.relay.mutation import CLIENT_MUTATION_ID, mutate_with_client_mutation_id
from todo_api.services.relay.node import NodeResolver

__all__ = [
    'Connection', 'Edge', 'PageInfo', 'connection_from_list',
    'cursor_for_object_in_connection', 'cursor_to_offset', 'offset_to_cursor',
    'GlobalId', 'from_global_id', 'local_id_for', 'to_global_id',
    'CLIENT_MUTATION_ID', 'mutate_with_client_mutation_id',
    'NodeResolver',
]
