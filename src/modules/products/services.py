"""Product service layer (Use Cases).

Orchestrates the catalog use cases for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Every mutation requires the ``admin`` role; the check runs before any
  write and before an uploaded image is stored.
- Create assigns ``image`` from the upload and ignores any client value.
- Update overwrites every editable field, ``image`` included.
- Delete only flips ``is_deleted``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import structlog

from modules.core.exceptions import NotAuthorized
from modules.core.uploads import store_image
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from django.core.files.uploadedfile import UploadedFile

    from modules.products.dtos import (
        CreateProductDTO,
        ProductListQuery,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository
    from modules.users.identity import RequestIdentity

logger = structlog.get_logger(__name__)

PRODUCT_UPLOAD_FOLDER = "products"


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    The caller's identity is passed into each mutating call.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def _require_admin(self, identity: RequestIdentity, action: str) -> None:
        if not identity.is_admin:
            logger.warning(
                "product.unauthorized",
                action=action,
                user_id=identity.user_id,
                role=identity.role,
            )
            raise NotAuthorized("User not authorized")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(
        self,
        dto: CreateProductDTO,
        identity: RequestIdentity,
        image: Optional[UploadedFile] = None,
    ) -> Product:
        """Create a product; ``image`` is the optional uploaded file.

        Raises:
            NotAuthorized: if the caller is not an admin.
        """
        self._require_admin(identity, "create")

        image_path = store_image(image, PRODUCT_UPLOAD_FOLDER) if image else None
        product = Product(**dto.editable_fields(), image=image_path)
        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            user_id=identity.user_id,
        )
        return product

    def update_product(
        self, id: str, dto: UpdateProductDTO, identity: RequestIdentity
    ) -> Product:
        """Overwrite all editable fields of a product.

        Raises:
            NotAuthorized: if the caller is not an admin.
            ProductNotFound: if the product does not exist.
        """
        self._require_admin(identity, "update")

        product = self._repo.update(id, dto.editable_fields())
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.updated", product_id=str(id), user_id=identity.user_id)
        return product

    def delete_product(self, id: str, identity: RequestIdentity) -> Product:
        """Soft-delete a product and return its post-update state.

        Raises:
            NotAuthorized: if the caller is not an admin.
            ProductNotFound: if the product does not exist.
        """
        self._require_admin(identity, "delete")

        product = self._repo.soft_delete(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info(
            "product.soft_deleted", product_id=str(id), user_id=identity.user_id
        )
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, query: ProductListQuery) -> Tuple[List[Product], int]:
        """Return one page of listable products and the total match count."""
        return self._repo.find_listable(query)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID, soft-deleted or out of stock.

        Raises:
            ProductNotFound: if the id is malformed or does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product
