"""Django ORM implementation of the profile repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.users.models import UserProfile
from modules.users.repositories.interfaces import IProfileRepository

logger = structlog.get_logger(__name__)


class ProfileDjangoRepository(IProfileRepository):
    """Concrete profile repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[UserProfile]:
        try:
            return UserProfile.objects.select_related("user").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_or_create_for_user(self, user_id: str) -> UserProfile:
        profile, created = UserProfile.objects.select_related("user").get_or_create(
            user_id=user_id
        )
        if created:
            logger.info("profile.created", user_id=user_id)
        return profile

    @transaction.atomic
    def update(self, id: str, fields: Dict[str, Any]) -> Optional[UserProfile]:
        try:
            updated = UserProfile.objects.filter(id=id).update(
                **fields, updated_at=timezone.now()
            )
        except (ValueError, ValidationError):
            return None
        if not updated:
            return None
        return self.get_by_id(id)
