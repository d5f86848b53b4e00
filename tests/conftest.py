from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from modules.products.models import Product
from modules.users.models import Role, UserProfile

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _media_root(settings, tmp_path):
    """Write uploads into a per-test directory."""
    settings.MEDIA_ROOT = tmp_path / "media"


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_user():
    def _make(username: str, role: str = Role.USER):
        user = User.objects.create_user(username=username, password="testpass123")
        UserProfile.objects.create(user=user, role=role)
        return user

    return _make


@pytest.fixture()
def admin_user(make_user):
    return make_user("catalog_admin", Role.ADMIN)


@pytest.fixture()
def shopper_user(make_user):
    return make_user("shopper", Role.USER)


@pytest.fixture()
def admin_client(admin_user):
    """APIClient force-authenticated as an admin."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture()
def shopper_client(shopper_user):
    """APIClient force-authenticated as a regular user."""
    client = APIClient()
    client.force_authenticate(user=shopper_user)
    return client


@pytest.fixture()
def make_product():
    """Persist a Product; ``age_minutes`` pushes ``created_at`` into the past."""

    def _make(age_minutes: int | None = None, **overrides) -> Product:
        defaults = {
            "product_name": "Widget",
            "description": "A fine widget",
            "price": Decimal("19.99"),
            "stock": 10,
            "brand": "Acme",
            "category": "Tools",
        }
        defaults.update(overrides)
        product = Product.objects.create(**defaults)
        if age_minutes is not None:
            created_at = timezone.now() - timedelta(minutes=age_minutes)
            Product.objects.filter(pk=product.pk).update(created_at=created_at)
            product.refresh_from_db()
        return product

    return _make
