import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from todo_api.core.exceptions import InvalidPaginationArgument

T = TypeVar('T')  # Type for the node in the connection

CURSOR_PREFIX = "arrayconnection:"


@dataclass
class PageInfo:
    """Information about pagination in a connection."""
    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None


@dataclass
class Edge(Generic[T]):
    """A node paired with its cursor."""
    node: T
    cursor: str


@dataclass
class Connection(Generic[T]):
    """A window over an ordered sequence of nodes."""
    edges: List[Edge[T]] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)


# Helper functions for cursors
def encode_cursor(value: str) -> str:
    """Encode a cursor value."""
    return base64.b64encode(value.encode()).decode()


def decode_cursor(cursor: str) -> str:
    """Decode a cursor value."""
    return base64.b64decode(cursor.encode(), validate=True).decode()


def offset_to_cursor(offset: int) -> str:
    """Cursor for the item at `offset` in its sequence."""
    return encode_cursor(f"{CURSOR_PREFIX}{offset}")


def cursor_to_offset(cursor: str) -> Optional[int]:
    """Offset encoded in `cursor`, or None if it is not one of ours."""
    try:
        value = decode_cursor(cursor)
    except (AttributeError, binascii.Error, UnicodeError):
        return None
    if not value.startswith(CURSOR_PREFIX):
        return None
    offset = value[len(CURSOR_PREFIX):]
    if not offset.isascii() or not offset.isdigit():
        return None
    # Reject padding and leading-zero variants of a real cursor
    if offset_to_cursor(int(offset)) != cursor:
        return None
    return int(offset)


def cursor_for_object_in_connection(sequence: Sequence[Any], obj: Any) -> Optional[str]:
    """Cursor of `obj` within `sequence`, or None if it is not there."""
    for offset, item in enumerate(sequence):
        if item == obj:
            return offset_to_cursor(offset)
    return None


def _matching_offset(cursor: Optional[str], length: int) -> Optional[int]:
    if cursor is None:
        return None
    offset = cursor_to_offset(cursor)
    if offset is None or offset >= length:
        return None
    return offset


def _validate_count(name: str, value: Optional[int]) -> None:
    if value is not None and value < 0:
        raise InvalidPaginationArgument(f"Argument '{name}' must be a non-negative integer, got {value}")


def connection_from_list(
    sequence: Sequence[T],
    before: Optional[str] = None,
    after: Optional[str] = None,
    first: Optional[int] = None,
    last: Optional[int] = None,
) -> Connection[T]:
    """
    Slice an ordered sequence into a connection.

    `after` and `before` narrow the window to the items strictly between the
    positions they name; a cursor that names no item in `sequence` is ignored.
    `first` then keeps the front of the window and `last` the back of what
    remains. Cursors always encode an item's offset in `sequence` itself, so
    they stay valid for later requests against the same ordering.

    Raises:
        InvalidPaginationArgument if `first` or `last` is negative
    """
    _validate_count("first", first)
    _validate_count("last", last)

    length = len(sequence)
    start, end = 0, length
    has_previous_page = False
    has_next_page = False

    after_offset = _matching_offset(after, length)
    if after_offset is not None:
        start = after_offset + 1
        has_previous_page = True

    before_offset = _matching_offset(before, length)
    if before_offset is not None:
        end = before_offset
        has_next_page = True

    # `before` at or ahead of `after` leaves nothing between them
    end = max(start, end)

    if first is not None and end - start > first:
        end = start + first
        has_next_page = True

    if last is not None and end - start > last:
        start = end - last
        has_previous_page = True

    edges = [
        Edge(node=sequence[offset], cursor=offset_to_cursor(offset))
        for offset in range(start, end)
    ]

    page_info = PageInfo(
        has_next_page=has_next_page,
        has_previous_page=has_previous_page,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
    )
    return Connection(edges=edges, page_info=page_info)
