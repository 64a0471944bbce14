"""Raw profile form state, as typed by the user."""

from dataclasses import dataclass, fields

import structlog

from config.constants import FORM_FIELD_MAX_LENGTHS
from models.profile import Profile

log = structlog.get_logger(__name__)


@dataclass
class ProfileForm:
    first_name: str = ""
    last_name: str = ""
    age: str = ""
    interests: str = ""

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileForm":
        """Pre-populate the form for editing an existing profile."""
        return cls(
            first_name=profile.first_name or "",
            last_name=profile.last_name or "",
            age=str(profile.age) if profile.age is not None else "",
            interests=", ".join(profile.interests) if profile.interests else "",
        )

    def set_field(self, name: str, value: str) -> None:
        """Update one field, clipped to the length its input accepts."""
        if name not in FORM_FIELD_MAX_LENGTHS:
            raise ValueError(f"Unknown form field: {name}")
        max_length = FORM_FIELD_MAX_LENGTHS[name]
        if max_length is not None:
            value = value[:max_length]
        log.debug("form_field_updated", field=name, value=value)
        setattr(self, name, value)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) == "" for f in fields(self))
