"""Text formatting for profile list entries."""

from models.profile import Profile


def format_age(age: int | None) -> str:
    """Format an age for display."""
    if age is None:
        return "N/A"
    return str(age)


def format_interests(interests: list[str]) -> str:
    """Join interests with commas. Empty lists render as an empty string."""
    return ", ".join(interests)


def format_profile(profile: Profile) -> str:
    """One-line summary: name, age and interests when present."""
    parts = [profile.full_name, f"Age: {format_age(profile.age)}"]
    if profile.interests:
        parts.append(f"Interests: {format_interests(profile.interests)}")
    return " | ".join(parts)


def truncate(text: str, max_length: int = 1024) -> str:
    """Truncate text to max_length, adding ellipsis if needed."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."
