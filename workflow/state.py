"""Form mode: creating a new profile or editing an existing one."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Creating:
    """No record selected; submit creates."""


@dataclass(frozen=True)
class Editing:
    """A record is selected; submit replaces it."""
    profile_id: str


FormMode = Creating | Editing
