"""
Preset Catalog Sounds API Routes
REST endpoint for renaming a sound within its preset
"""

from fastapi import APIRouter, Depends

from ...database.schemas import ErrorResponse, SoundRenameRequest, SoundRenamedResponse
from ...services.catalog_service import CatalogService
from ..dependencies import get_catalog_service

router = APIRouter()


@router.put(
    "/sound/{sound_name}/modifyName",
    response_model=SoundRenamedResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse}
    }
)
async def rename_sound(
    sound_name: str,
    request: SoundRenameRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Rename a sound; presetName identifies the preset the name is unique in"""
    return await service.rename_sound(sound_name, request.new_name, request.preset_name)
