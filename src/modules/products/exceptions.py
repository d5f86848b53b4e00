"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
envelope responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The id is malformed or does not resolve to a stored product.

    Soft-deleted products still resolve.
    """
