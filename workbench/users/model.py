"""User records and the request body that creates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_REQUIRED_NAME = (
    "Key: 'UserRequest.Name' Error:Field validation for 'Name' failed on the 'required' tag"
)


class ValidationError(Exception):
    """Raised when a request body cannot be read or fails validation."""


def _format_time(moment: datetime) -> str:
    """Format a moment as RFC 3339 with trailing zeros of the fraction dropped."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, rest = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{rest:02d}"


@dataclass
class User:
    """A stored user."""

    id: str = ""
    name: str = ""
    age: int = 0
    email: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        """Return the user as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "email": self.email,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


def _lookup(data: dict[str, Any], name: str) -> Any:
    """Find a key case-insensitively; a later matching key wins."""
    wanted = name.casefold()
    found = None
    for key, value in data.items():
        if key.casefold() == wanted:
            found = value
    return found


def _string(data: dict[str, Any], name: str) -> str:
    value = _lookup(data, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"cannot decode {type(value).__name__} into string field {name}")
    return value


def _integer(data: dict[str, Any], name: str) -> int:
    value = _lookup(data, name)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"cannot decode {type(value).__name__} into int field {name}")
    return value


@dataclass
class UserRequest:
    """The body of a create or update request."""

    name: str = ""
    age: int = 0
    email: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> UserRequest:
        """Read a request from decoded JSON, matching keys case-insensitively."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError(f"cannot decode {type(data).__name__} into a user request")
        return cls(
            name=_string(data, "name"),
            age=_integer(data, "age"),
            email=_string(data, "email"),
        )

    def validate(self) -> None:
        """Raise ``ValidationError`` unless a name is given."""
        if not self.name:
            raise ValidationError(_REQUIRED_NAME)

    def to_model(self) -> User:
        """Build a new user stamped with the current time."""
        now = datetime.now().astimezone()
        return User(
            name=self.name,
            age=self.age,
            email=self.email,
            created_at=now,
            updated_at=now,
        )