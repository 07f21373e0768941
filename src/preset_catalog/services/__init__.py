"""
Preset Catalog Services
"""

from .catalog_assembler import CatalogAssembler, assemble_preset, normalize_factory_flag
from .catalog_service import CatalogService

__all__ = [
    "CatalogAssembler",
    "CatalogService",
    "assemble_preset",
    "normalize_factory_flag"
]
