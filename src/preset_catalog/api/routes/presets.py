"""
Preset Catalog Presets API Routes
REST endpoints for listing, looking up, adding and renaming presets
"""

from typing import List

from fastapi import APIRouter, Depends

from ...database.schemas import (
    ErrorResponse,
    PresetCreateRequest,
    PresetCreatedResponse,
    PresetRenameRequest,
    PresetRenamedResponse,
    PresetResponse
)
from ...services.catalog_service import CatalogService
from ..dependencies import get_catalog_service

router = APIRouter()


@router.get("/presets", response_model=List[PresetResponse])
async def list_presets(service: CatalogService = Depends(get_catalog_service)):
    """List every preset with its samples"""
    return await service.list_presets()


@router.get(
    "/presets/{name}",
    response_model=PresetResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_preset(name: str, service: CatalogService = Depends(get_catalog_service)):
    """Get one preset with its samples by exact name"""
    return await service.get_preset(name)


@router.post(
    "/preset/addPreset",
    status_code=201,
    response_model=PresetCreatedResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
)
async def add_preset(
    request: PresetCreateRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Create a preset with a name not used by any other preset"""
    return await service.add_preset(request.name, request.type, request.is_factory_preset)


@router.put(
    "/preset/{preset_name}/modifyName",
    response_model=PresetRenamedResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse}
    }
)
async def rename_preset(
    preset_name: str,
    request: PresetRenameRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Rename a preset"""
    return await service.rename_preset(preset_name, request.new_name)
