import strawberry
from todo_api.api.graphql.common.types import Node

@strawberry.type
class Todo(Node):
    text: str
    complete: bool
