from dataclasses import dataclass
from typing import Any, Optional
from pydantic import BaseModel

class UserDTO(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    createdAt: str


@dataclass
class CreateUserInput:
    email: Any
    name: Any = None
