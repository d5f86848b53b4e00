"""Base abstract models shared by every catalog module.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``SoftDeleteModel``: Extends BaseModel with a boolean ``is_deleted`` flag.

Notes:
- ``objects`` manager returns ALL records (unfiltered).  Use ``.alive()``
  explicitly to exclude soft-deleted rows.  Direct look-ups by id must still
  find soft-deleted records.
- The flag only ever moves from ``False`` to ``True``; there is no restore.
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# ---------------------------------------------------------------------------
# Soft Delete infrastructure
# ---------------------------------------------------------------------------


class SoftDeleteQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def alive(self) -> SoftDeleteQuerySet:
        return self.filter(is_deleted=False)

    def soft_delete(self) -> int:
        """Flag every row in the queryset as deleted in a single UPDATE.

        Rows already flagged are matched again, so repeating the call on the
        same id still reports the row.
        """
        return self.update(is_deleted=True, updated_at=timezone.now())


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """Unfiltered manager exposing ``.alive()``."""


class SoftDeleteModel(BaseModel):
    """Abstract model with soft-delete via a single ``is_deleted`` flag."""

    is_deleted = models.BooleanField(default=False, db_index=True)

    objects = SoftDeleteManager()

    class Meta:
        abstract = True
