"""Unit tests for RequestIdentity resolution."""

from __future__ import annotations

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory
from rest_framework_simplejwt.tokens import AccessToken

from modules.users.identity import RequestIdentity, identity_from_request
from modules.users.models import Role

pytestmark = pytest.mark.unit


def _request(user=None, token=None) -> Request:
    request = Request(APIRequestFactory().get("/api/v1/profile"))
    if user is not None:
        request.user = user
        request.auth = token
    return request


class TestRequestIdentity:
    def test_anonymous(self):
        identity = RequestIdentity.anonymous()
        assert identity.is_authenticated is False
        assert identity.is_admin is False

    def test_admin_flag(self):
        assert RequestIdentity("1", "boss", "admin").is_admin is True
        assert RequestIdentity("2", "jane", "user").is_admin is False


class TestIdentityFromRequest:
    def test_unauthenticated_request(self):
        identity = identity_from_request(_request())
        assert identity == RequestIdentity.anonymous()

    def test_role_from_profile(self, admin_user):
        identity = identity_from_request(_request(admin_user))
        assert identity.user_id == str(admin_user.pk)
        assert identity.username == "catalog_admin"
        assert identity.role == Role.ADMIN

    def test_missing_profile_defaults_to_user_role(self, django_user_model):
        user = django_user_model.objects.create_user(username="bare", password="x")
        identity = identity_from_request(_request(user))
        assert identity.role == Role.USER

    def test_token_claim_wins_over_profile(self, shopper_user):
        token = AccessToken.for_user(shopper_user)
        token["role"] = Role.ADMIN
        identity = identity_from_request(_request(shopper_user, token))
        assert identity.is_admin is True

    def test_token_without_claim_falls_back_to_profile(self, admin_user):
        token = AccessToken.for_user(admin_user)
        identity = identity_from_request(_request(admin_user, token))
        assert identity.role == Role.ADMIN
