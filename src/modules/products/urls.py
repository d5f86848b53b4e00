"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet


class OptionalSlashRouter(SimpleRouter):
    """Router whose routes match with or without a trailing slash."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"


router = OptionalSlashRouter()
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
