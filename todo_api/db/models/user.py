from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class User:
    type_name: ClassVar[str] = "User"

    id: str
