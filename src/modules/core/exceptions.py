"""Cross-module domain exceptions.

Raised by the Service Layer; the API layer translates them into
envelope responses with the matching HTTP status code.
"""

from __future__ import annotations


class NotAuthorized(Exception):
    """The caller's role does not allow the requested operation."""


class InvalidImage(Exception):
    """An uploaded file is missing or is not an accepted image type."""
