"""Error types surfaced to the workflow."""

from config.constants import ProfileOperation


class ProfileDeskError(Exception):
    """Base class for errors that carry a user-facing message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ProfileDeskError):
    """Raised locally when form input fails a rule. Never reaches the network."""


class TransportError(ProfileDeskError):
    """Any failure between issuing a profiles API call and getting a usable result.

    Not-found, server errors and unreachable hosts all surface as this one type;
    only ``message`` is meant for callers.
    """

    def __init__(self, message: str, operation: ProfileOperation, status: int | None = None) -> None:
        self.operation = operation
        self.status = status
        super().__init__(message)
