import dataclasses
from typing import Any, Dict, Optional
import strawberry

# Every input carries an optional client mutation id that is echoed back unchanged

@strawberry.input
class AddTodoInput:
    text: str
    client_mutation_id: Optional[str] = strawberry.UNSET

@strawberry.input
class ChangeTodoStatusInput:
    id: strawberry.ID
    complete: bool
    client_mutation_id: Optional[str] = strawberry.UNSET

@strawberry.input
class MarkAllTodosInput:
    complete: bool
    client_mutation_id: Optional[str] = strawberry.UNSET

@strawberry.input
class RemoveCompletedTodosInput:
    client_mutation_id: Optional[str] = strawberry.UNSET

@strawberry.input
class RemoveTodoInput:
    id: strawberry.ID
    client_mutation_id: Optional[str] = strawberry.UNSET

@strawberry.input
class RenameTodoInput:
    id: strawberry.ID
    text: str
    client_mutation_id: Optional[str] = strawberry.UNSET

def input_to_dict(input: Any) -> Dict[str, Any]:
    """Field values of a Strawberry input, leaving out the ones the client omitted."""
    values = {field.name: getattr(input, field.name) for field in dataclasses.fields(input)}
    return {name: value for name, value in values.items() if value is not strawberry.UNSET}
