import base64
import pytest

from todo_api.core.exceptions import InvalidPaginationArgument
from todo_api.services.relay.connection import (
    connection_from_list,
    cursor_for_object_in_connection,
    cursor_to_offset,
    offset_to_cursor,
)

# Test data
LETTERS = ["A", "B", "C", "D", "E"]

def nodes(connection):
    return [edge.node for edge in connection.edges]

def test_empty_sequence():
    """An empty sequence gives no edges, no cursors and no further pages"""
    connection = connection_from_list([])
    assert connection.edges == []
    assert connection.page_info.has_next_page is False
    assert connection.page_info.has_previous_page is False
    assert connection.page_info.start_cursor is None
    assert connection.page_info.end_cursor is None

def test_no_arguments_returns_everything():
    connection = connection_from_list(LETTERS)
    assert nodes(connection) == LETTERS
    assert connection.page_info.has_next_page is False
    assert connection.page_info.has_previous_page is False
    assert connection.page_info.start_cursor == offset_to_cursor(0)
    assert connection.page_info.end_cursor == offset_to_cursor(4)

def test_first_takes_the_front():
    """first=2 over five items: two edges and a next page"""
    connection = connection_from_list(LETTERS, first=2)
    assert nodes(connection) == ["A", "B"]
    assert connection.page_info.has_next_page is True
    assert connection.page_info.has_previous_page is False

def test_after_then_first():
    """Paging forward from the second item"""
    connection = connection_from_list(LETTERS, after=offset_to_cursor(1), first=2)
    assert nodes(connection) == ["C", "D"]
    assert connection.page_info.has_next_page is True
    assert connection.page_info.has_previous_page is True

def test_last_takes_the_back():
    """last=2 over five items: two edges and a previous page"""
    connection = connection_from_list(LETTERS, last=2)
    assert nodes(connection) == ["D", "E"]
    assert connection.page_info.has_previous_page is True
    assert connection.page_info.has_next_page is False

def test_before_then_last():
    connection = connection_from_list(LETTERS, before=offset_to_cursor(3), last=2)
    assert nodes(connection) == ["B", "C"]
    assert connection.page_info.has_previous_page is True
    assert connection.page_info.has_next_page is True

def test_before_and_after_bound_the_window():
    connection = connection_from_list(LETTERS, after=offset_to_cursor(0), before=offset_to_cursor(4))
    assert nodes(connection) == ["B", "C", "D"]
    assert connection.page_info.has_previous_page is True
    assert connection.page_info.has_next_page is True

def test_before_not_after_after_gives_empty_window():
    connection = connection_from_list(LETTERS, after=offset_to_cursor(3), before=offset_to_cursor(1))
    assert connection.edges == []
    assert connection.page_info.start_cursor is None

def test_first_and_last_compose():
    """first is applied before last"""
    connection = connection_from_list(LETTERS, first=4, last=2)
    assert nodes(connection) == ["C", "D"]
    assert connection.page_info.has_next_page is True
    assert connection.page_info.has_previous_page is True

def test_first_zero_reports_remaining_items():
    connection = connection_from_list(LETTERS, first=0)
    assert connection.edges == []
    assert connection.page_info.has_next_page is True

    # Nothing after the last item, so nothing more to fetch
    connection = connection_from_list(LETTERS, after=offset_to_cursor(4), first=0)
    assert connection.edges == []
    assert connection.page_info.has_next_page is False

def test_first_larger_than_window():
    connection = connection_from_list(LETTERS, first=10)
    assert nodes(connection) == LETTERS
    assert connection.page_info.has_next_page is False

@pytest.mark.parametrize("n", range(0, 6))
@pytest.mark.parametrize("k", range(0, 7))
def test_first_length_bound(n, k):
    """Edge count is min(k, n) and hasNextPage is k < n"""
    connection = connection_from_list(list(range(n)), first=k)
    assert len(connection.edges) == min(k, n)
    assert connection.page_info.has_next_page is (k < n)

@pytest.mark.parametrize("n", range(0, 6))
@pytest.mark.parametrize("k", range(0, 7))
def test_last_length_bound(n, k):
    """Edge count is min(k, n) and hasPreviousPage is k < n"""
    connection = connection_from_list(list(range(n)), last=k)
    assert len(connection.edges) == min(k, n)
    assert connection.page_info.has_previous_page is (k < n)

def test_cursors_use_positions_in_the_unsliced_sequence():
    """Cursors stay meaningful for the next request against the same ordering"""
    connection = connection_from_list(LETTERS, after=offset_to_cursor(1), first=2)
    assert [edge.cursor for edge in connection.edges] == [offset_to_cursor(2), offset_to_cursor(3)]

    # Passing the end cursor back continues where the page left off
    next_page = connection_from_list(LETTERS, after=connection.page_info.end_cursor, first=2)
    assert nodes(next_page) == ["E"]
    assert next_page.page_info.has_next_page is False

def test_every_cursor_resumes_strictly_after_its_edge():
    for edge in connection_from_list(LETTERS).edges:
        offset = LETTERS.index(edge.node)
        assert nodes(connection_from_list(LETTERS, after=edge.cursor)) == LETTERS[offset + 1:]

@pytest.mark.parametrize("cursor", [
    "garbage!",
    base64.b64encode(b"something:else").decode(),
    base64.b64encode(b"arrayconnection:x").decode(),
    offset_to_cursor(5),
    offset_to_cursor(100),
])
def test_unmatched_cursors_are_ignored(cursor):
    """A cursor naming no item leaves the window unchanged"""
    for connection in (
        connection_from_list(LETTERS, after=cursor),
        connection_from_list(LETTERS, before=cursor),
    ):
        assert nodes(connection) == LETTERS
        assert connection.page_info.has_next_page is False
        assert connection.page_info.has_previous_page is False

@pytest.mark.parametrize("arguments", [{"first": -1}, {"last": -1}, {"first": 1, "last": -5}])
def test_negative_counts_fail(arguments):
    with pytest.raises(InvalidPaginationArgument):
        connection_from_list(LETTERS, **arguments)

def test_negative_counts_fail_on_empty_sequence():
    with pytest.raises(InvalidPaginationArgument):
        connection_from_list([], first=-1)

def test_cursor_offsets_round_trip():
    assert cursor_to_offset(offset_to_cursor(7)) == 7
    assert cursor_to_offset("not a cursor") is None

def test_cursor_for_object_in_connection():
    assert cursor_for_object_in_connection(LETTERS, "C") == offset_to_cursor(2)
    assert cursor_for_object_in_connection(LETTERS, "Z") is None

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

def with_other_padding_bits(cursor):
    """Same bytes when decoded leniently, but not the cursor we hand out"""
    body = cursor.rstrip("=")
    last = BASE64_ALPHABET[BASE64_ALPHABET.index(body[-1]) ^ 1]
    return body[:-1] + last + cursor[len(body):]

@pytest.mark.parametrize("cursor", [
    with_other_padding_bits(offset_to_cursor(2)),
    base64.b64encode("arrayconnection:02".encode()).decode(),
    base64.b64encode("arrayconnection:٣".encode()).decode(),
])
def test_non_canonical_cursors_are_not_positions(cursor):
    """Cursors are opaque: only the exact cursor we issued names a position"""
    assert cursor != offset_to_cursor(2)
    assert cursor_to_offset(cursor) is None
    assert nodes(connection_from_list(LETTERS, after=cursor)) == LETTERS
