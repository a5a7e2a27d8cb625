import strawberry

# Common types that can be shared across features

@strawberry.interface
class Node:
    """An object with a globally unique ID."""
    id: strawberry.ID
