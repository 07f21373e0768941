"""
Preset Catalog Pydantic Schemas
Request/response models for API validation and serialization
"""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


# Base configuration for all schemas
class BaseSchema(BaseModel):
    """Base schema with common configuration"""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True
    )


# Request Schemas
# Required fields are declared optional here: presence and emptiness are
# checked by the repositories so the error message matches the field.
class PresetCreateRequest(BaseSchema):
    """Body of the add preset operation"""
    name: Optional[str] = Field(None, description="Preset name, unique across the catalog")
    type: Optional[str] = Field(None, description="Free-form preset classification")
    is_factory_preset: Optional[bool] = Field(None, alias="isFactoryPreset")


class PresetRenameRequest(BaseSchema):
    """Body of the rename preset operation"""
    new_name: Optional[str] = Field(None, alias="newName")


class SoundRenameRequest(BaseSchema):
    """Body of the rename sound operation"""
    new_name: Optional[str] = Field(None, alias="newName")
    preset_name: Optional[str] = Field(None, alias="presetName", description="Owning preset of the sound")


# Assembled catalog Schemas
class SampleResponse(BaseSchema):
    """Sound as exposed inside an assembled preset"""
    name: str
    url: str


class PresetResponse(BaseSchema):
    """Preset joined with its sounds"""
    name: str
    type: str
    is_factory_presets: bool = Field(False, alias="isFactoryPresets")
    samples: List[SampleResponse] = Field(default_factory=list)


# Mutation result Schemas
class PresetCreatedResponse(BaseSchema):
    """Result of the add preset operation"""
    message: str
    name: str
    type: str
    is_factory_preset: bool = Field(..., alias="isFactoryPreset")


class PresetRenamedResponse(BaseSchema):
    """Result of the rename preset operation"""
    message: str
    old_name: str = Field(..., alias="oldName")
    new_name: str = Field(..., alias="newName")


class SoundRenamedResponse(PresetRenamedResponse):
    """Result of the rename sound operation"""
    preset_name: str = Field(..., alias="presetName")


class ErrorResponse(BaseSchema):
    """Error body shared by every failure"""
    error: str
