"""Profile and token serializers."""

from __future__ import annotations

from rest_framework import serializers
from rest_framework_simplejwt.serializers import (
    TokenObtainPairSerializer,
    TokenRefreshSerializer,
)
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from modules.users.identity import ROLE_CLAIM, profile_role
from modules.users.models import UserProfile


class ProfileSerializer(serializers.ModelSerializer):
    """Read-only view of the caller's profile."""

    id = serializers.CharField(source="user.pk", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = UserProfile
        fields = ["id", "username", "email", "role", "image"]
        read_only_fields = fields


class RoleTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Issues access/refresh tokens carrying the user's ``role`` claim."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token[ROLE_CLAIM] = profile_role(user.pk)
        return token


class RoleTokenRefreshSerializer(TokenRefreshSerializer):
    """Refreshes access tokens with the role as currently stored.

    The role copied from the refresh token is replaced, so a role change
    takes effect at the next refresh.
    """

    def validate(self, attrs):
        data = super().validate(attrs)
        access = AccessToken(data["access"])
        access[ROLE_CLAIM] = profile_role(access[api_settings.USER_ID_CLAIM])
        data["access"] = str(access)
        return data
