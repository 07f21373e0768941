"""
Preset Repository
Specialized repository for Preset model operations
"""

from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Preset
from .base import BaseRepository, NotFoundError, ValidationError


def preset_not_found(name: str) -> NotFoundError:
    return NotFoundError(f'Preset "{name}" non trouvé')


def preset_name_taken(name: str) -> str:
    return f'Un preset avec le nom "{name}" existe déjà'


class PresetRepository(BaseRepository[Preset]):
    """Repository for Preset operations"""

    def __init__(self, session: AsyncSession):
        super().__init__(Preset, session)

    async def list_all(self) -> List[Preset]:
        """Get every preset, unfiltered"""
        return await self.get_multi()

    async def get_by_name(self, name: str) -> Optional[Preset]:
        """Get the preset whose name equals name exactly (case-sensitive)"""
        result = await self.execute(
            select(self.model).where(self.model.name == name),
            "getting preset by name"
        )
        return result.scalar_one_or_none()

    async def get_by_name_or_404(self, name: str) -> Preset:
        """Get preset by name or raise NotFoundError"""
        preset = await self.get_by_name(name)
        if preset is None:
            raise preset_not_found(name)
        return preset

    async def add(
        self,
        name: Optional[str],
        preset_type: Optional[str],
        is_factory_preset: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Create a preset

        The insert relies on uq_presets_name rather than a prior lookup, so
        two concurrent adds of the same name cannot both succeed.

        Returns:
            The stored fields, without the generated id
        """
        if not name or not preset_type:
            raise ValidationError('Les champs "name" et "type" sont requis')

        flag = is_factory_preset if is_factory_preset is not None else False

        await self.create(
            conflict_message=preset_name_taken(name),
            name=name,
            type=preset_type,
            is_factory_preset=flag
        )
        await self.commit("new preset")

        return {"name": name, "type": preset_type, "is_factory_preset": flag}

    async def rename(self, current_name: str, new_name: Optional[str]) -> Tuple[str, str]:
        """
        Rename a preset in place, keeping its id

        The update is conditional on the current name and guarded by
        uq_presets_name, so no separate existence check is needed.

        Returns:
            (old_name, new_name)
        """
        if not new_name:
            raise ValidationError('Le champ "newName" est requis dans le body')

        if new_name == current_name:
            await self.get_by_name_or_404(current_name)
            return current_name, new_name

        result = await self.execute(
            update(self.model)
            .where(self.model.name == current_name)
            .values(name=new_name),
            "renaming preset",
            conflict_message=preset_name_taken(new_name)
        )

        if result.rowcount == 0:
            raise preset_not_found(current_name)
        await self.commit("preset rename")

        return current_name, new_name
