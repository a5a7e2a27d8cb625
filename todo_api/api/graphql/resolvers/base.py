import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic
from pydantic import ValidationError
from strawberry.types import Info

from todo_api.core.exceptions import InvalidPaginationArgument, StoreFailure
from todo_api.db.store import TodoStore
from todo_api.services.relay import NodeResolver

logger = logging.getLogger(__name__)

T = TypeVar('T')  # Type for the domain model
G = TypeVar('G')  # Type for the GraphQL type

@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Report anything the store raises as a StoreFailure on the current field."""
    try:
        yield
    except (StoreFailure, InvalidPaginationArgument, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Store failure while {action}: {e}", exc_info=True)
        raise StoreFailure(f"Error {action}: {str(e)}") from e

class BaseResolver(Generic[T, G]):
    """Base resolver class to standardize resolver patterns across all domain modules."""
    
    @classmethod
    def to_graphql_type(cls, model: T) -> G:
        """Convert a domain model to a GraphQL type."""
        raise NotImplementedError("Subclasses must implement to_graphql_type method")
    
    @classmethod
    def get_store_from_info(cls, info: Info) -> TodoStore:
        """Extract the todo store from GraphQL info context."""
        return info.context["store"]
    
    @classmethod
    def get_nodes_from_info(cls, info: Info) -> NodeResolver:
        """Extract the node dispatch table from GraphQL info context."""
        return info.context["nodes"]
