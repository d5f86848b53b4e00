"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``UserProfile``).  Look-ups follow the
    Null Object convention: a missing or malformed id yields ``None``.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def update(self, id: str, fields: Dict[str, Any]) -> Optional[T]:
        """Overwrite ``fields`` on the entity in one statement.

        Returns the post-update state, or ``None`` when ``id`` does not resolve.
        """
