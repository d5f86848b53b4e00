"""Profile API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from modules.core.exceptions import InvalidImage, NotAuthorized
from modules.core.responses import failure, internal_error, success
from modules.users.identity import identity_from_request
from modules.users.repositories.django_repository import ProfileDjangoRepository
from modules.users.serializers import (
    ProfileSerializer,
    RoleTokenObtainPairSerializer,
    RoleTokenRefreshSerializer,
)
from modules.users.services import ProfileService


class ProfileView(APIView):
    """GET /api/v1/profile"""

    permission_classes = [IsAuthenticated]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProfileService(repository=ProfileDjangoRepository())

    def get(self, request: Request) -> Response:
        try:
            profile = self._service.get_profile(identity_from_request(request))
            data = ProfileSerializer(profile).data
        except NotAuthorized as exc:
            return failure(str(exc), status.HTTP_401_UNAUTHORIZED)
        except Exception as exc:
            return internal_error(request, "Error fetching profile", exc)
        return success("Profile fetched successfully", data)


class ProfileImageView(APIView):
    """PUT /api/v1/profile/image (multipart, field ``image``)"""

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProfileService(repository=ProfileDjangoRepository())

    def put(self, request: Request) -> Response:
        try:
            profile = self._service.update_image(
                identity_from_request(request), request.FILES.get("image")
            )
            data = ProfileSerializer(profile).data
        except InvalidImage as exc:
            return failure(str(exc), status.HTTP_400_BAD_REQUEST)
        except NotAuthorized as exc:
            return failure(str(exc), status.HTTP_401_UNAUTHORIZED)
        except Exception as exc:
            return internal_error(request, "Error updating profile image", exc)
        return success("Profile image updated successfully", data)


class RoleTokenObtainPairView(TokenObtainPairView):
    """POST /api/v1/auth/token/ issuing tokens with the ``role`` claim."""

    serializer_class = RoleTokenObtainPairSerializer


class RoleTokenRefreshView(TokenRefreshView):
    """POST /api/v1/auth/token/refresh/ re-reading the caller's role."""

    serializer_class = RoleTokenRefreshSerializer
