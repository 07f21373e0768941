"""
Preset Catalog Database Module
Exports database models, connection management, and Base
"""

from .connection import Base, DatabaseManager, database_manager
from .models import Preset, Sound

__all__ = [
    "Base",
    "DatabaseManager",
    "database_manager",
    "Preset",
    "Sound"
]
