"""
Preset Catalog Repository Layer
Data access layer with async store operations
"""

from .base import (
    BaseRepository,
    RepositoryError,
    ValidationError,
    NotFoundError,
    ConflictError,
    StoreError
)
from .preset_repository import PresetRepository
from .sound_repository import SoundRepository

__all__ = [
    "BaseRepository",
    "RepositoryError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    "PresetRepository",
    "SoundRepository"
]
