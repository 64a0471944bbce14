"""Profile records as exchanged with the profiles API."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Profile:
    """A profile as returned by the server. The server is the source of truth."""
    id: str
    first_name: str = ""
    last_name: str = ""
    age: int | None = None
    interests: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Any) -> "Profile":
        """Build from a JSON object. Raises ValueError when the shape is unusable."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a profile object, got {type(data).__name__}")
        raw_id = data.get("_id", data.get("id"))
        if raw_id is None or raw_id == "":
            raise ValueError("Profile has no identifier")

        age = data.get("age")
        if isinstance(age, bool) or not isinstance(age, (int, type(None))):
            raise ValueError(f"Profile age must be an integer, got {age!r}")

        names: dict[str, str] = {}
        for key in ("firstName", "lastName"):
            value = data.get(key) or ""
            if not isinstance(value, str):
                raise ValueError(f"Profile {key} must be a string, got {value!r}")
            names[key] = value

        interests = data.get("interests") or []
        if not isinstance(interests, list):
            raise ValueError("Profile interests must be a list")

        return cls(
            id=str(raw_id),
            first_name=names["firstName"],
            last_name=names["lastName"],
            age=age,
            interests=[str(i) for i in interests],
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class ProfileInput:
    """Validated form data ready to be sent to the server."""
    first_name: str
    last_name: str
    age: int
    interests: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
            "interests": list(self.interests),
        }
