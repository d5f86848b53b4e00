"""Authenticated identity passed explicitly into service calls.

Views build a ``RequestIdentity`` from the DRF request once and hand it to
the service layer; services never read ``request.user`` themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rest_framework.request import Request

from modules.users.models import Role, UserProfile

ANONYMOUS_ROLE = "anonymous"
ROLE_CLAIM = "role"


@dataclass(frozen=True)
class RequestIdentity:
    user_id: Optional[str]
    username: str
    role: str

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def anonymous(cls) -> RequestIdentity:
        return cls(user_id=None, username="", role=ANONYMOUS_ROLE)


def profile_role(user_id) -> str:
    """Current stored role of ``user_id``; users without a profile are ``user``."""
    profile = UserProfile.objects.filter(user_id=user_id).only("role").first()
    return profile.role if profile else Role.USER


def identity_from_request(request: Request) -> RequestIdentity:
    """Resolve the caller's identity.

    The ``role`` claim of a verified access token wins; requests
    authenticated without a token (sessions, test clients) fall back to the
    stored profile.
    """
    user = request.user
    if user is None or not user.is_authenticated:
        return RequestIdentity.anonymous()

    token = request.auth
    role = None
    if token is not None and hasattr(token, "get"):
        role = token.get(ROLE_CLAIM)
    if not role:
        role = profile_role(user.pk)

    return RequestIdentity(
        user_id=str(user.pk),
        username=user.get_username(),
        role=role,
    )
