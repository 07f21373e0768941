"""
Sound Repository
Specialized repository for Sound model operations
"""

import uuid
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Preset, Sound
from .base import BaseRepository, NotFoundError, ValidationError
from .preset_repository import preset_not_found


class SoundRepository(BaseRepository[Sound]):
    """Repository for Sound operations, scoped by owning preset"""

    def __init__(self, session: AsyncSession):
        super().__init__(Sound, session)

    async def get_by_preset(self, preset_id: uuid.UUID) -> List[Sound]:
        """Get all sounds owned by a preset, in store order"""
        return await self.get_multi({"preset_id": preset_id})

    async def get_by_presets(
        self,
        preset_ids: Iterable[uuid.UUID]
    ) -> Dict[uuid.UUID, List[Sound]]:
        """Get the sounds of many presets in one query, grouped by preset id"""
        ids = list(preset_ids)
        grouped: Dict[uuid.UUID, List[Sound]] = defaultdict(list)
        if not ids:
            return grouped

        for sound in await self.get_multi({"preset_id": ids}):
            grouped[sound.preset_id].append(sound)
        return grouped

    async def get_in_preset(self, preset_id: uuid.UUID, name: str) -> Optional[Sound]:
        """Get a sound by name within one preset"""
        result = await self.execute(
            select(self.model).where(
                (self.model.preset_id == preset_id) &
                (self.model.name == name)
            ),
            "getting sound in preset"
        )
        return result.scalar_one_or_none()

    async def rename(
        self,
        preset_name: Optional[str],
        current_name: str,
        new_name: Optional[str]
    ) -> Tuple[str, str, str]:
        """
        Rename a sound within its preset

        Returns:
            (old_name, new_name, owning preset's current name)
        """
        if not new_name:
            raise ValidationError('Le champ "newName" est requis dans le body')
        if not preset_name:
            raise ValidationError(
                'Le champ "presetName" est requis dans le body pour identifier le son'
            )

        result = await self.execute(
            select(Preset.id, Preset.name).where(Preset.name == preset_name),
            "getting owning preset"
        )
        owner = result.first()
        if owner is None:
            raise preset_not_found(preset_name)
        owner_id, owner_name = owner

        sound_missing = NotFoundError(
            f'Son "{current_name}" non trouvé dans le preset "{preset_name}"'
        )

        if new_name == current_name:
            if await self.get_in_preset(owner_id, current_name) is None:
                raise sound_missing
            return current_name, new_name, owner_name

        # Guarded by uq_sounds_preset_name, scoped to this preset only
        result = await self.execute(
            update(self.model)
            .where(
                (self.model.preset_id == owner_id) &
                (self.model.name == current_name)
            )
            .values(name=new_name),
            "renaming sound",
            conflict_message=(
                f'Un son avec le nom "{new_name}" existe déjà dans le preset "{owner_name}"'
            )
        )

        if result.rowcount == 0:
            raise sound_missing
        await self.commit("sound rename")

        return current_name, new_name, owner_name
