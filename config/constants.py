"""Constants used across the application."""

from enum import Enum


class ProfileOperation(str, Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def fallback_message(self) -> str:
        """Generic message used when neither the server nor the transport explains a failure."""
        return _FALLBACK_MESSAGES[self]


_FALLBACK_MESSAGES = {
    ProfileOperation.LIST: "Failed to fetch profiles",
    ProfileOperation.CREATE: "Failed to create profile",
    ProfileOperation.UPDATE: "Failed to update profile",
    ProfileOperation.DELETE: "Failed to delete profile",
}


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION = "validation"


# Notice titles
NOTICE_TITLES = {
    NoticeKind.SUCCESS: "Success",
    NoticeKind.ERROR: "Error",
    NoticeKind.VALIDATION: "Validation Error",
}

# Success messages
PROFILE_CREATED = "Profile created successfully"
PROFILE_UPDATED = "Profile updated successfully"
PROFILE_DELETED = "Profile deleted successfully"

# Delete confirmation prompt
DELETE_CONFIRM_TITLE = "Delete Profile"
DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this profile?"

# Field limits
NAME_MAX_LENGTH = 50
AGE_MIN = 13
AGE_MAX = 120
AGE_MAX_DIGITS = 3

# Max characters the form inputs accept (None = unbounded)
FORM_FIELD_MAX_LENGTHS: dict[str, int | None] = {
    "first_name": NAME_MAX_LENGTH,
    "last_name": NAME_MAX_LENGTH,
    "age": AGE_MAX_DIGITS,
    "interests": None,
}

# Form labels
FORM_TITLE_CREATE = "Create Profile"
FORM_TITLE_EDIT = "Edit Profile"
SUBMIT_LABEL_CREATE = "Create Profile"
SUBMIT_LABEL_UPDATE = "Update Profile"
SUBMIT_LABEL_CREATING = "Creating..."
SUBMIT_LABEL_UPDATING = "Updating..."
