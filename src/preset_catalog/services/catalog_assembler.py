"""
Catalog Assembler
Joins presets with the sounds that reference them into the public shape
"""

from typing import Iterable, List

from ..database.models import Preset, Sound, normalize_factory_flag
from ..database.repositories import PresetRepository, SoundRepository
from ..database.schemas import PresetResponse, SampleResponse


def assemble_preset(preset: Preset, sounds: Iterable[Sound]) -> PresetResponse:
    """Build the public representation of one preset from its owned sounds"""
    return PresetResponse(
        name=preset.name,
        type=preset.type,
        is_factory_presets=preset.factory_flag,
        samples=[SampleResponse(name=sound.name, url=sound.url) for sound in sounds]
    )


class CatalogAssembler:
    """Read path shared by the full listing and the single lookup"""

    def __init__(self, presets: PresetRepository, sounds: SoundRepository):
        self.presets = presets
        self.sounds = sounds

    async def list_all(self) -> List[PresetResponse]:
        """Every preset joined with its sounds"""
        presets = await self.presets.list_all()
        sounds_by_preset = await self.sounds.get_by_presets(p.id for p in presets)
        return [
            assemble_preset(preset, sounds_by_preset.get(preset.id, []))
            for preset in presets
        ]

    async def find_by_name(self, name: str) -> PresetResponse:
        """One preset joined with its sounds, or NotFoundError"""
        preset = await self.presets.get_by_name_or_404(name)
        sounds = await self.sounds.get_by_preset(preset.id)
        return assemble_preset(preset, sounds)


__all__ = ["CatalogAssembler", "assemble_preset", "normalize_factory_flag"]
