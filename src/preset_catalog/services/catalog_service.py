"""
Preset Catalog Service
Unit of work behind each catalog operation
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import catalog_logger
from ..database.repositories import ConflictError, PresetRepository, SoundRepository
from ..database.schemas import (
    PresetCreatedResponse,
    PresetRenamedResponse,
    PresetResponse,
    SoundRenamedResponse
)
from .catalog_assembler import CatalogAssembler

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Catalog operations bound to one store session

    Validation and uniqueness live in the repositories; this layer runs
    them, passes reads through the assembler and records what changed.
    """

    def __init__(self, session: AsyncSession):
        self.presets = PresetRepository(session)
        self.sounds = SoundRepository(session)
        self.assembler = CatalogAssembler(self.presets, self.sounds)

    async def list_presets(self) -> List[PresetResponse]:
        presets = await self.assembler.list_all()
        logger.debug(f"Sending {len(presets)} presets")
        return presets

    async def get_preset(self, name: str) -> PresetResponse:
        return await self.assembler.find_by_name(name)

    async def add_preset(
        self,
        name: Optional[str],
        preset_type: Optional[str],
        is_factory_preset: Optional[bool] = None
    ) -> PresetCreatedResponse:
        try:
            created = await self.presets.add(name, preset_type, is_factory_preset)
        except ConflictError:
            catalog_logger.log_conflict("preset", name)
            raise

        catalog_logger.log_preset_created(
            created["name"], created["type"], created["is_factory_preset"]
        )
        return PresetCreatedResponse(
            message=f'Preset "{created["name"]}" créé avec succès',
            **created
        )

    async def rename_preset(
        self,
        current_name: str,
        new_name: Optional[str]
    ) -> PresetRenamedResponse:
        try:
            old_name, new_name = await self.presets.rename(current_name, new_name)
        except ConflictError:
            catalog_logger.log_conflict("preset", new_name, current_name=current_name)
            raise

        catalog_logger.log_preset_renamed(old_name, new_name)
        return PresetRenamedResponse(
            message=f'Preset renommé de "{old_name}" à "{new_name}"',
            old_name=old_name,
            new_name=new_name
        )

    async def rename_sound(
        self,
        current_name: str,
        new_name: Optional[str],
        preset_name: Optional[str]
    ) -> SoundRenamedResponse:
        try:
            old_name, new_name, owner_name = await self.sounds.rename(
                preset_name, current_name, new_name
            )
        except ConflictError:
            catalog_logger.log_conflict(
                "sound", new_name, current_name=current_name, preset_name=preset_name
            )
            raise

        catalog_logger.log_sound_renamed(owner_name, old_name, new_name)
        return SoundRenamedResponse(
            message=f'Son renommé de "{old_name}" à "{new_name}"',
            old_name=old_name,
            new_name=new_name,
            preset_name=owner_name
        )
