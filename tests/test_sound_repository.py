"""
Sound repository tests
Per-preset name uniqueness and lookups by owning preset
"""
import uuid

import pytest

from preset_catalog.database.repositories import (
    ConflictError,
    NotFoundError,
    SoundRepository,
    ValidationError
)


async def rename(database, preset_name, current_name, new_name):
    async with database.get_session() as session:
        return await SoundRepository(session).rename(preset_name, current_name, new_name)


async def sound_names(database, preset_id):
    async with database.get_session() as session:
        return sorted(s.name for s in await SoundRepository(session).get_by_preset(preset_id))


@pytest.mark.integration
class TestSoundLookup:

    @pytest.mark.asyncio
    async def test_get_by_presets_groups_by_owner(self, database, seed):
        drums = await seed("Drums", sounds=["Kick", "Snare"])
        bass = await seed("Bass", sounds=["Sub"])
        empty = await seed("Empty")

        async with database.get_session() as session:
            grouped = await SoundRepository(session).get_by_presets([drums, bass, empty])

        assert sorted(s.name for s in grouped[drums]) == ["Kick", "Snare"]
        assert [s.name for s in grouped[bass]] == ["Sub"]
        assert grouped.get(empty, []) == []

    @pytest.mark.asyncio
    async def test_get_by_presets_with_no_ids(self, database):
        async with database.get_session() as session:
            assert dict(await SoundRepository(session).get_by_presets([])) == {}

    @pytest.mark.asyncio
    async def test_get_in_preset_is_scoped(self, database, seed):
        a = await seed("A", sounds=["Tom"])
        b = await seed("B")

        async with database.get_session() as session:
            repository = SoundRepository(session)
            assert (await repository.get_in_preset(a, "Tom")).url == "A/Tom.wav"
            assert await repository.get_in_preset(b, "Tom") is None

    @pytest.mark.asyncio
    async def test_same_name_allowed_in_different_presets(self, database, seed):
        a = await seed("A", sounds=["Tom"])
        b = await seed("B", sounds=["Tom"])

        assert await sound_names(database, a) == ["Tom"]
        assert await sound_names(database, b) == ["Tom"]

    @pytest.mark.asyncio
    async def test_duplicate_name_in_same_preset_rejected_by_store(self, database, seed):
        drums = await seed("Drums", sounds=["Kick"])

        with pytest.raises(ConflictError):
            async with database.get_session() as session:
                await SoundRepository(session).create(preset_id=drums, name="Kick", url="x.wav")

        assert await sound_names(database, drums) == ["Kick"]


@pytest.mark.integration
class TestRenameSound:

    @pytest.mark.asyncio
    async def test_rename_within_preset(self, database, seed):
        drums = await seed("Drums", sounds=["Kick", "Snare"])

        result = await rename(database, "Drums", "Snare", "Kick2")

        assert result == ("Snare", "Kick2", "Drums")
        assert await sound_names(database, drums) == ["Kick", "Kick2"]

    @pytest.mark.asyncio
    async def test_rename_to_sibling_name_conflicts(self, database, seed):
        drums = await seed("Drums", sounds=["Kick", "Snare"])

        with pytest.raises(ConflictError, match='"Kick".*"Drums"'):
            await rename(database, "Drums", "Snare", "Kick")

        assert await sound_names(database, drums) == ["Kick", "Snare"]

    @pytest.mark.asyncio
    async def test_rename_does_not_touch_other_presets(self, database, seed):
        a = await seed("A", sounds=["Tom"])
        b = await seed("B", sounds=["Tom"])

        await rename(database, "A", "Tom", "Tom2")

        assert await sound_names(database, a) == ["Tom2"]
        assert await sound_names(database, b) == ["Tom"]

    @pytest.mark.asyncio
    async def test_name_used_elsewhere_is_not_a_conflict(self, database, seed):
        await seed("A", sounds=["Tom"])
        await seed("B", sounds=["Kick"])

        assert await rename(database, "A", "Tom", "Kick") == ("Tom", "Kick", "A")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("preset_name, new_name", [
        ("Drums", None),
        ("Drums", ""),
        (None, "Kick2"),
        ("", "Kick2"),
    ])
    async def test_rename_requires_new_name_and_preset(self, database, seed, preset_name, new_name):
        await seed("Drums", sounds=["Kick"])

        with pytest.raises(ValidationError):
            await rename(database, preset_name, "Kick", new_name)

    @pytest.mark.asyncio
    async def test_rename_in_missing_preset(self, database):
        with pytest.raises(NotFoundError, match='Preset "Ghost"'):
            await rename(database, "Ghost", "Kick", "Kick2")

    @pytest.mark.asyncio
    async def test_rename_missing_sound(self, database, seed):
        await seed("Drums", sounds=["Kick"])

        with pytest.raises(NotFoundError, match='Son "Clap"'):
            await rename(database, "Drums", "Clap", "Clap2")

    @pytest.mark.asyncio
    async def test_sound_of_other_preset_is_not_found(self, database, seed):
        await seed("A", sounds=["Tom"])
        await seed("B")

        with pytest.raises(NotFoundError):
            await rename(database, "B", "Tom", "Tom2")

    @pytest.mark.asyncio
    async def test_rename_to_same_name_is_noop(self, database, seed):
        drums = await seed("Drums", sounds=["Kick"])

        assert await rename(database, "Drums", "Kick", "Kick") == ("Kick", "Kick", "Drums")
        assert await sound_names(database, drums) == ["Kick"]

    @pytest.mark.asyncio
    async def test_same_name_rename_of_missing_sound(self, database, seed):
        await seed("Drums")

        with pytest.raises(NotFoundError):
            await rename(database, "Drums", "Kick", "Kick")

    @pytest.mark.asyncio
    async def test_orphan_sounds_are_never_joined(self, database, seed):
        """Sounds pointing at no preset stay invisible rather than failing"""
        drums = await seed("Drums", sounds=["Kick"])
        async with database.get_session() as session:
            await SoundRepository(session).create(preset_id=uuid.uuid4(), name="Lost", url="lost.wav")

        async with database.get_session() as session:
            grouped = await SoundRepository(session).get_by_presets([drums])

        assert list(grouped) == [drums]
        assert [s.name for s in grouped[drums]] == ["Kick"]
