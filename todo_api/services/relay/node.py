import logging
from typing import Any, Callable, Dict, Optional

from todo_api.core.exceptions import InvalidGlobalId
from todo_api.services.relay.global_id import from_global_id

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Optional[Any]]


class NodeResolver:
    """
    Dispatch table from type name to the store accessor for that type.

    Nodes are tagged variants: every object the resolver hands out carries a
    class-level `type_name` naming the entry it was fetched through.
    """

    def __init__(self):
        self._fetchers: Dict[str, Fetcher] = {}

    def register(self, type_name: str, fetcher: Fetcher) -> None:
        if type_name in self._fetchers:
            raise ValueError(f"Node type already registered: {type_name}")
        self._fetchers[type_name] = fetcher

    @property
    def type_names(self):
        return frozenset(self._fetchers)

    def resolve_node(self, global_id: str) -> Optional[Any]:
        """Look up any node by global id. Malformed or unknown ids give None."""
        try:
            type_name, local_id = from_global_id(global_id)
        except InvalidGlobalId as e:
            logger.debug(f"Ignoring node lookup: {e}")
            return None

        fetcher = self._fetchers.get(type_name)
        if fetcher is None:
            logger.debug(f"Ignoring node lookup for unknown type {type_name}")
            return None
        return fetcher(local_id)

    def resolve_type(self, node: Any) -> str:
        """Type tag of a node. There is no fallback for unregistered variants."""
        type_name = getattr(node, "type_name", None)
        if type_name not in self._fetchers:
            raise TypeError(f"Cannot resolve node type of {type(node).__name__}")
        return type_name
