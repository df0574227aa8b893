"""Entity to DTO projections used at the HTTP boundary."""
from datetime import datetime, timezone
from app.db.models import Space, User
from app.schemas.spaces import SpaceDTO
from app.schemas.users import UserDTO


def to_iso8601(value: datetime) -> str:
    """Render a stored timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive values are UTC, which is how every column is written.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_space_dto(space: Space) -> SpaceDTO:
    return SpaceDTO(
        id=space.id,
        name=space.name,
        capacity=space.capacity,
        createdAt=to_iso8601(space.created_at),
        updatedAt=to_iso8601(space.updated_at),
    )


def to_user_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        email=user.email,
        name=user.name,
        createdAt=to_iso8601(user.created_at),
    )
