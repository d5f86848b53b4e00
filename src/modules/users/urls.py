"""Profile URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.users.views import ProfileImageView, ProfileView

urlpatterns = [
    path("profile", ProfileView.as_view(), name="profile"),
    path("profile/image", ProfileImageView.as_view(), name="profile_image"),
]
