"""Profiles REST API client."""

from urllib.parse import quote

import structlog

from config.constants import ProfileOperation
from models.profile import Profile, ProfileInput
from services.base import BaseApiClient, MalformedBodyError

log = structlog.get_logger(__name__)


def _profile_path(profile_id: str) -> str:
    return f"/profiles/{quote(profile_id, safe='')}"


class ProfileClient(BaseApiClient):
    """List, create, update and delete profiles.

    Every method raises ``TransportError`` on failure, with a message fit to
    show the user as-is.
    """

    async def list_profiles(self) -> list[Profile]:
        with self.translate_errors(ProfileOperation.LIST):
            data = await self._request("GET", "/profiles")
            if not isinstance(data, list):
                raise MalformedBodyError("Expected a list of profiles")
            profiles = [Profile.from_api(item) for item in data]
        log.debug("profiles_fetched", count=len(profiles))
        return profiles

    async def create_profile(self, data: ProfileInput) -> Profile:
        """Create a profile. ``data`` must already be validated; the server assigns the id."""
        with self.translate_errors(ProfileOperation.CREATE):
            body = await self._request("POST", "/profiles", payload=data.to_payload())
            profile = Profile.from_api(body)
        log.info("profile_created", profile_id=profile.id)
        return profile

    async def update_profile(self, profile_id: str, data: ProfileInput) -> Profile:
        """Replace the profile stored under ``profile_id``."""
        with self.translate_errors(ProfileOperation.UPDATE):
            body = await self._request("PUT", _profile_path(profile_id), payload=data.to_payload())
            profile = Profile.from_api(body)
        log.info("profile_updated", profile_id=profile.id)
        return profile

    async def delete_profile(self, profile_id: str) -> None:
        # Repeated deletes are not treated as success; whatever the server says surfaces.
        with self.translate_errors(ProfileOperation.DELETE):
            await self._request("DELETE", _profile_path(profile_id), expect_body=False)
        log.info("profile_deleted", profile_id=profile_id)
