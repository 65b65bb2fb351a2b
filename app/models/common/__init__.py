"""Common models - base classes."""

from app.models.common.base import BaseEntity, BaseRecord

__all__ = [
    "BaseEntity",
    "BaseRecord",
]
