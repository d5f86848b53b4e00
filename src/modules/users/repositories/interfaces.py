"""Profile repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import UserProfile


class IProfileRepository(IRepository["UserProfile"]):
    """Repository contract for user profiles."""

    @abstractmethod
    def get_or_create_for_user(self, user_id: str) -> "UserProfile":
        """Return the profile of ``user_id``, creating a default one if absent."""
