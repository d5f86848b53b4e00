"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
for non-existent or malformed ids instead of raising HTTP-level
exceptions; the Service Layer decides how to translate a missing entity
into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.products.dtos import ProductListQuery
from modules.products.filters import ProductListingFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key, soft-deleted or not."""
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def find_listable(self, query: ProductListQuery) -> Tuple[List[Product], int]:
        """Count and fetch listable products with one shared predicate.

        Listable means not soft-deleted and ``stock > 0``; ``category`` and
        ``q`` narrow it further.  The page is ordered newest first.
        """
        base = Product.objects.alive().filter(stock__gt=0)
        matching = ProductListingFilter(
            data={"category": query.category, "q": query.q},
            queryset=base,
        ).qs

        total = matching.count()
        page = matching.order_by("-created_at")
        if query.limit:
            page = page[query.skip : query.skip + query.limit]
        else:
            page = page[query.skip :]
        return list(page), total

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def update(self, id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Overwrite ``fields`` with a single UPDATE, then read back.

        Returns ``None`` if no product exists with the given id.
        """
        try:
            updated = Product.objects.filter(id=id).update(
                **fields, updated_at=timezone.now()
            )
        except (ValueError, ValidationError):
            return None
        if not updated:
            return None
        return self.get_by_id(id)

    @transaction.atomic
    def soft_delete(self, id: str) -> Optional[Product]:
        """Flag a product as deleted.

        Already-deleted products are matched again, so the call is
        idempotent.  Returns ``None`` if no product exists with the id.
        """
        try:
            updated = Product.objects.filter(id=id).soft_delete()
        except (ValueError, ValidationError):
            return None
        if not updated:
            return None
        return self.get_by_id(id)
