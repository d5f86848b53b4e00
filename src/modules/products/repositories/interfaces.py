"""Product repository interface.

Extends ``IRepository[Product]`` with persistence of new rows, the paginated
listing used by the catalog and the soft-delete flag flip.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import ProductListQuery
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_listable(self, query: ProductListQuery) -> Tuple[List[Product], int]:
        """Return one page of listable products and the total match count.

        Both use the same predicate; only the page is offset and capped.
        """

    @abstractmethod
    def save(self, entity: Product) -> Product:
        """Persist a new product."""

    @abstractmethod
    def soft_delete(self, id: str) -> Optional[Product]:
        """Flag the product as deleted and return its post-update state."""
