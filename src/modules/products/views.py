"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
handler converts failures into the response envelope locally: domain
exceptions map to 400/401/404 and anything else is logged, forwarded to
the error-reporting signal and answered with a generic 500.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import InvalidImage, NotAuthorized
from modules.core.responses import failure, internal_error, success, validation_errors
from modules.core.uploads import validate_image
from modules.products.dtos import CreateProductDTO, ProductListQuery, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.users.identity import identity_from_request

INVALID_INPUT = "Invalid data inputs passed"
NOT_FOUND = "Product not found"

EDITABLE_FIELDS = (
    "product_name",
    "description",
    "price",
    "stock",
    "brand",
    "category",
)


def _payload(request: Request, *fields: str) -> Dict[str, Any]:
    if not hasattr(request.data, "get"):
        raise ParseError("Expected an object of product fields.")
    return {field: request.data.get(field) for field in fields}


class ProductViewSet(ViewSet):
    """ViewSet for the catalog.

    Reads are public; writes require an authenticated caller and the
    service additionally requires the ``admin`` role.
    """

    parser_classes = [JSONParser, MultiPartParser, FormParser]
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [AllowAny()]
        return [IsAuthenticated()]

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products?limit&skip&category&q"""
        try:
            params = request.query_params
            query = ProductListQuery(
                limit=params.get("limit"),
                skip=params.get("skip"),
                category=params.get("category"),
                q=params.get("q"),
            )
            products, total = self._service.list_products(query)
            data = ProductSerializer(products, many=True).data
        except Exception as exc:
            return internal_error(request, "Failed to list products", exc)

        return success(
            "Products listed successfully",
            data,
            total=total,
            limit=query.limit,
            skip=query.skip,
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        try:
            product = self._service.get_product(pk)
            data = ProductSerializer(product).data
        except ProductNotFound:
            return failure(NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except Exception as exc:
            return internal_error(request, "Error fetching product", exc)
        return success("Product fetched successfully", data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products (JSON or multipart with optional ``image`` file)"""
        try:
            try:
                image = request.FILES.get("image")
                dto = CreateProductDTO(**_payload(request, *EDITABLE_FIELDS))
                if image is not None:
                    validate_image(image)
            except PydanticValidationError as exc:
                return failure(
                    INVALID_INPUT, status.HTTP_400_BAD_REQUEST, validation_errors(exc)
                )
            except InvalidImage as exc:
                return failure(
                    INVALID_INPUT,
                    status.HTTP_400_BAD_REQUEST,
                    [{"field": "image", "detail": str(exc)}],
                )
            except ParseError as exc:
                return failure(
                    INVALID_INPUT, status.HTTP_400_BAD_REQUEST, str(exc.detail)
                )

            product = self._service.create_product(
                dto, identity_from_request(request), image=image
            )
            data = ProductSerializer(product).data
        except NotAuthorized as exc:
            return failure(str(exc), status.HTTP_401_UNAUTHORIZED)
        except Exception as exc:
            return internal_error(request, "Error creating product", exc)

        return success(
            "Product created successfully",
            data,
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}"""
        try:
            try:
                dto = UpdateProductDTO(**_payload(request, *EDITABLE_FIELDS, "image"))
            except PydanticValidationError as exc:
                return failure(
                    INVALID_INPUT, status.HTTP_400_BAD_REQUEST, validation_errors(exc)
                )
            except ParseError as exc:
                return failure(
                    INVALID_INPUT, status.HTTP_400_BAD_REQUEST, str(exc.detail)
                )

            product = self._service.update_product(
                pk, dto, identity_from_request(request)
            )
            data = ProductSerializer(product).data
        except NotAuthorized as exc:
            return failure(str(exc), status.HTTP_401_UNAUTHORIZED)
        except ProductNotFound:
            return failure(NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except Exception as exc:
            return internal_error(request, "Error updating product", exc)

        return success("Product updated successfully", data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk} (soft delete)"""
        try:
            product = self._service.delete_product(pk, identity_from_request(request))
            data = ProductSerializer(product).data
        except NotAuthorized as exc:
            return failure(str(exc), status.HTTP_401_UNAUTHORIZED)
        except ProductNotFound:
            return failure(NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except Exception as exc:
            return internal_error(request, "Error soft deleting product", exc)

        return success("Product soft deleted successfully", data)
