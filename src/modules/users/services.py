"""Profile service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.core.exceptions import NotAuthorized
from modules.core.uploads import store_image, validate_image

if TYPE_CHECKING:
    from django.core.files.uploadedfile import UploadedFile

    from modules.users.identity import RequestIdentity
    from modules.users.models import UserProfile
    from modules.users.repositories.interfaces import IProfileRepository

logger = structlog.get_logger(__name__)

PROFILE_UPLOAD_FOLDER = "profiles"


class ProfileService:
    def __init__(self, repository: IProfileRepository) -> None:
        self._repo = repository

    def _require_user(self, identity: RequestIdentity) -> str:
        if not identity.is_authenticated:
            raise NotAuthorized("User not authenticated")
        return identity.user_id

    def get_profile(self, identity: RequestIdentity) -> UserProfile:
        """Return the caller's profile, creating a default one on first access."""
        user_id = self._require_user(identity)
        return self._repo.get_or_create_for_user(user_id)

    def update_image(
        self, identity: RequestIdentity, upload: UploadedFile | None
    ) -> UserProfile:
        """Store ``upload`` and point the caller's profile at it.

        Raises:
            InvalidImage: missing file or unsupported extension.
        """
        user_id = self._require_user(identity)
        validate_image(upload)

        profile = self._repo.get_or_create_for_user(user_id)
        path = store_image(upload, PROFILE_UPLOAD_FOLDER)
        profile = self._repo.update(str(profile.id), {"image": path})
        logger.info("profile.image_updated", user_id=user_id, image=path)
        return profile
