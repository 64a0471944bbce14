"""Profile form workflow: one form, one list, create-or-update on submit."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog

from config.constants import (
    DELETE_CONFIRM_MESSAGE,
    DELETE_CONFIRM_TITLE,
    FORM_TITLE_CREATE,
    FORM_TITLE_EDIT,
    NOTICE_TITLES,
    PROFILE_CREATED,
    PROFILE_DELETED,
    PROFILE_UPDATED,
    SUBMIT_LABEL_CREATE,
    SUBMIT_LABEL_CREATING,
    SUBMIT_LABEL_UPDATE,
    SUBMIT_LABEL_UPDATING,
    NoticeKind,
)
from models.profile import Profile
from services.errors import TransportError, ValidationError
from services.profile_client import ProfileClient
from workflow.form import ProfileForm
from workflow.state import Creating, Editing, FormMode
from workflow.validation import build_profile_input

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Notice:
    """A titled message for the user."""
    kind: NoticeKind
    message: str

    @property
    def title(self) -> str:
        return NOTICE_TITLES[self.kind]


# async fn(title, message) -> True to proceed
ConfirmCallback = Callable[[str, str], Awaitable[bool]]
NoticeCallback = Callable[[Notice], Awaitable[None]]


class ProfileWorkflow:
    """Holds the in-memory profile list and form, and drives the client.

    Every successful mutation is followed by a full re-fetch of the list.
    """

    def __init__(
        self,
        client: ProfileClient,
        confirm: ConfirmCallback,
        on_notice: NoticeCallback | None = None,
    ) -> None:
        self.client = client
        self.confirm = confirm
        self.on_notice = on_notice
        self.profiles: list[Profile] = []
        self.form = ProfileForm()
        self.mode: FormMode = Creating()
        self.loading = False
        self.submitting = False

    # ── View state ──

    @property
    def editing_id(self) -> str | None:
        return self.mode.profile_id if isinstance(self.mode, Editing) else None

    @property
    def form_title(self) -> str:
        return FORM_TITLE_EDIT if isinstance(self.mode, Editing) else FORM_TITLE_CREATE

    @property
    def submit_label(self) -> str:
        editing = isinstance(self.mode, Editing)
        if self.submitting:
            return SUBMIT_LABEL_UPDATING if editing else SUBMIT_LABEL_CREATING
        return SUBMIT_LABEL_UPDATE if editing else SUBMIT_LABEL_CREATE

    @property
    def can_cancel(self) -> bool:
        return isinstance(self.mode, Editing)

    # ── Actions ──

    async def load(self) -> bool:
        """Replace the profile list with the server's. Keeps the old list on failure."""
        self.loading = True
        try:
            self.profiles = await self.client.list_profiles()
            return True
        except TransportError as e:
            await self._notify(NoticeKind.ERROR, e.message)
            return False
        finally:
            self.loading = False

    def set_field(self, name: str, value: str) -> None:
        self.form.set_field(name, value)

    def reset_form(self) -> None:
        self.form = ProfileForm()
        self.mode = Creating()

    def select_for_edit(self, profile: Profile) -> None:
        self.form = ProfileForm.from_profile(profile)
        self.mode = Editing(profile.id)
        log.debug("editing_profile", profile_id=profile.id)

    def cancel_edit(self) -> None:
        self.reset_form()

    async def submit(self) -> bool:
        """Create or update from the form. Returns True when the server accepted it."""
        if self.submitting:
            log.debug("submit_ignored_in_flight")
            return False

        try:
            data = build_profile_input(self.form)
        except ValidationError as e:
            await self._notify(NoticeKind.VALIDATION, e.message)
            return False

        mode = self.mode
        self.submitting = True
        try:
            if isinstance(mode, Editing):
                await self.client.update_profile(mode.profile_id, data)
                message = PROFILE_UPDATED
            else:
                await self.client.create_profile(data)
                message = PROFILE_CREATED
        except TransportError as e:
            await self._notify(NoticeKind.ERROR, e.message)
            return False
        finally:
            self.submitting = False

        self.reset_form()
        await self._notify(NoticeKind.SUCCESS, message)
        await self.load()
        return True

    async def delete(self, profile_id: str) -> bool:
        """Delete after the user confirms. Declining changes nothing."""
        if not await self.confirm(DELETE_CONFIRM_TITLE, DELETE_CONFIRM_MESSAGE):
            log.debug("delete_declined", profile_id=profile_id)
            return False

        try:
            await self.client.delete_profile(profile_id)
        except TransportError as e:
            await self._notify(NoticeKind.ERROR, e.message)
            return False

        if self.editing_id == profile_id:
            self.reset_form()
        await self._notify(NoticeKind.SUCCESS, PROFILE_DELETED)
        await self.load()
        return True

    async def _notify(self, kind: NoticeKind, message: str) -> None:
        log.info("notice", kind=kind.value, message=message)
        if self.on_notice is None:
            return
        try:
            await self.on_notice(Notice(kind, message))
        except Exception as e:
            log.error("notice_delivery_failed", error=str(e))
