import base64
import binascii
from typing import NamedTuple, Optional

from todo_api.core.exceptions import InvalidGlobalId

SEPARATOR = ":"


class GlobalId(NamedTuple):
    type_name: str
    local_id: str


def to_global_id(type_name: str, local_id: str) -> str:
    """Encodes a type name and a store-local id into an opaque global id."""
    if not type_name or SEPARATOR in type_name:
        raise ValueError(f"Invalid type name for a global id: {type_name!r}")
    local_id = str(local_id)
    if not local_id:
        raise ValueError("Global ids need a non-empty local id")
    combined = f"{type_name}{SEPARATOR}{local_id}"
    return base64.b64encode(combined.encode("utf-8")).decode("utf-8")


def from_global_id(global_id: str) -> GlobalId:
    """Decodes an opaque global id back into its type name and local id."""
    try:
        decoded = base64.b64decode(global_id.encode("utf-8"), validate=True).decode("utf-8")
    except (AttributeError, binascii.Error, UnicodeError) as e:
        raise InvalidGlobalId(f"Invalid global id: {global_id!r}. Error: {e}")

    type_name, separator, local_id = decoded.partition(SEPARATOR)
    if not separator or not type_name or not local_id:
        raise InvalidGlobalId(f"Invalid global id: {global_id!r}")
    # Only the exact encoding of a pair is accepted, never an equivalent spelling
    if to_global_id(type_name, local_id) != global_id:
        raise InvalidGlobalId(f"Non-canonical global id: {global_id!r}")
    return GlobalId(type_name, local_id)


def local_id_for(global_id: str, type_name: str) -> Optional[str]:
    """Local id behind `global_id` if it names a `type_name` object, else None."""
    try:
        decoded = from_global_id(global_id)
    except InvalidGlobalId:
        return None
    if decoded.type_name != type_name:
        return None
    return decoded.local_id
