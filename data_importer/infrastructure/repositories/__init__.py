"""Repository implementations for data access.

This module provides the concrete repository behind
``DatasetRepositoryPort``.
"""

from .dataset_repository import DatasetRepository

__all__ = ["DatasetRepository"]
