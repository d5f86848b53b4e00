"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductListQuery``: listing filters and pagination offsets.
- ``CreateProductDTO``: input for product creation (no ``image``: the
  server assigns it from the upload).
- ``UpdateProductDTO``: input for a full overwrite, ``image`` included.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.models import ALL_CATEGORIES

DEFAULT_LIMIT = 3
DEFAULT_SKIP = 0

# Bounds of the ``products.price`` column (max_digits=12, decimal_places=2).
PRICE_INTEGER_DIGITS = 10
CENTS = Decimal("0.01")
PRICE_LIMIT = Decimal(10) ** PRICE_INTEGER_DIGITS

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Query DTO
# ---------------------------------------------------------------------------


def _to_int(value: Any, default: int) -> int:
    """Read the leading integer of ``value`` (``"10abc"`` -> 10, ``"5.9"`` -> 5)."""
    if isinstance(value, int):
        return value
    match = LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return default
    return int(match.group(1))


class ProductListQuery(BaseModel):
    """Listing filters.

    ``limit``/``skip`` never fail validation: unparsable values fall back to
    the defaults.  ``limit=0`` means no cap.
    """

    model_config = ConfigDict(frozen=True)

    limit: int = DEFAULT_LIMIT
    skip: int = DEFAULT_SKIP
    category: str = ALL_CATEGORIES
    q: str = ""

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: Any) -> int:
        return abs(_to_int(v, DEFAULT_LIMIT))

    @field_validator("skip", mode="before")
    @classmethod
    def parse_skip(cls, v: Any) -> int:
        return max(_to_int(v, DEFAULT_SKIP), 0)

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> str:
        return v if v else ALL_CATEGORIES

    @field_validator("q", mode="before")
    @classmethod
    def default_query(cls, v: Any) -> str:
        return v or ""


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``product_name`` is a non-empty string.
    - ``price`` parses as a decimal that fits the price column, and
      ``stock`` as an integer.
    No floor is applied to either.
    """

    model_config = ConfigDict(frozen=True)

    product_name: str
    price: Decimal
    stock: int
    description: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None

    @field_validator("product_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_fit_column(cls, v: Decimal) -> Decimal:
        too_large = (
            v.adjusted() >= PRICE_INTEGER_DIGITS
            or abs(v.quantize(CENTS)) >= PRICE_LIMIT
        )
        if too_large:
            raise ValueError(
                f"Price must have at most {PRICE_INTEGER_DIGITS} digits "
                f"before the decimal point."
            )
        return v

    def editable_fields(self) -> dict[str, Any]:
        return self.model_dump()


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for product update requests.

    The update is a full overwrite: optional fields left out of the request
    are written as ``None``.  ``image`` is taken verbatim from the client.
    """

    image: Optional[str] = None
