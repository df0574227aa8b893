from dataclasses import dataclass
from typing import Any
from pydantic import BaseModel, Field

class SpaceDTO(BaseModel):
    id: str
    name: str
    capacity: int
    createdAt: str = Field(..., examples=["2026-01-07T10:00:00.000Z"])
    updatedAt: str = Field(..., examples=["2026-01-07T10:00:00.000Z"])


@dataclass
class CreateSpaceInput:
    name: Any
    capacity: Any


@dataclass
class UpdateSpaceInput:
    name: Any = None
    capacity: Any = None
