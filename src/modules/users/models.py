"""User profile holding the authorization role and avatar path.

One profile per Django auth user, created lazily on first access.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from modules.core.models import BaseModel


class Role(models.TextChoices):
    ADMIN = "admin", "Admin"
    USER = "user", "User"


class UserProfile(BaseModel):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.USER,
    )
    image = models.CharField(max_length=500, null=True, blank=True, default=None)

    class Meta:
        db_table = "user_profiles"

    def __str__(self) -> str:
        return f"{self.user} ({self.role})"
