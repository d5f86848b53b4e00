"""Product DRF serializers for API output.

Input validation lives in the pydantic DTOs (``dtos.py``); this
serializer only renders stored products into the response envelope.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "product_name",
            "description",
            "price",
            "stock",
            "image",
            "brand",
            "category",
            "is_deleted",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
