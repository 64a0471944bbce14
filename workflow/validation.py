"""Local form validation. Runs before any network call."""

import re

from config.constants import AGE_MAX, AGE_MIN, NAME_MAX_LENGTH
from models.profile import ProfileInput
from services.errors import ValidationError
from workflow.form import ProfileForm

# ASCII digits only: no sign, no other scripts' digits
_AGE_PATTERN = re.compile(r"^[0-9]+$")


def parse_age(raw: str) -> int | None:
    """Parse an unsigned base-10 integer age. Returns None if the text is not one."""
    raw = raw.strip()
    if not _AGE_PATTERN.match(raw):
        return None
    return int(raw)


def parse_interests(raw: str) -> list[str]:
    """Split comma-separated interests, trimming each and dropping empty entries."""
    return [i.strip() for i in raw.split(",") if i.strip()]


def _check_name(value: str, label: str) -> str | None:
    name = value.strip()
    if not name:
        return f"{label} is required"
    if len(name) > NAME_MAX_LENGTH:
        return f"{label} must be at most {NAME_MAX_LENGTH} characters"
    return None


def _validated_age(form: ProfileForm) -> int:
    """Check the rules in order (first name, last name, age) and return the parsed age.

    Raises ValidationError with the first failing rule's message.
    """
    error = _check_name(form.first_name, "First name") or _check_name(form.last_name, "Last name")
    if error:
        raise ValidationError(error)
    if not form.age.strip():
        raise ValidationError("Age is required")
    age = parse_age(form.age)
    if age is None or age < AGE_MIN or age > AGE_MAX:
        raise ValidationError(f"Age must be between {AGE_MIN} and {AGE_MAX}")
    return age


def validate_form(form: ProfileForm) -> str | None:
    """Return the first failing rule's message, or None."""
    try:
        _validated_age(form)
    except ValidationError as e:
        return e.message
    return None


def build_profile_input(form: ProfileForm) -> ProfileInput:
    """Validate the form and convert it to a request payload.

    Raises ValidationError with the first failing rule's message.
    """
    age = _validated_age(form)
    return ProfileInput(
        first_name=form.first_name.strip(),
        last_name=form.last_name.strip(),
        age=age,
        interests=parse_interests(form.interests),
    )
