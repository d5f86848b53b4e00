"""Product model.

Rules:
- Deletion is a flag flip (``is_deleted``, inherited from SoftDeleteModel);
  rows are never removed through the API.
- Listings only ever see rows with ``is_deleted=False`` and ``stock > 0``,
  newest ``created_at`` first.
- ``price`` and ``stock`` have no floor: negative values are stored as given.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel

ALL_CATEGORIES = "All"


class Product(SoftDeleteModel):
    """Catalog item sold by the storefront."""

    product_name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    stock = models.IntegerField(default=0)
    image = models.CharField(max_length=500, null=True, blank=True, default=None)
    brand = models.CharField(max_length=255, null=True, blank=True, default=None)
    category = models.CharField(max_length=255, null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["is_deleted", "category", "-created_at"],
                name="products_listing_idx",
            ),
        ]

    def __str__(self) -> str:
        return self.product_name
