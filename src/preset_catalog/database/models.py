"""
Preset Catalog Database Models
SQLAlchemy ORM models for presets and their sounds
"""

import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import (
    String,
    Boolean,
    TIMESTAMP,
    Index,
    UniqueConstraint,
    Uuid
)
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column

from .connection import Base


def normalize_factory_flag(
    is_factory_preset: Optional[bool],
    is_factory_presets: Optional[bool]
) -> bool:
    """Resolve the factory flag from its current and legacy field names"""
    if is_factory_preset is not None:
        return bool(is_factory_preset)
    if is_factory_presets is not None:
        return bool(is_factory_presets)
    return False


class Preset(Base):
    """Named group of sounds"""
    __tablename__ = "presets"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )

    # Globally unique, see uq_presets_name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(255), nullable=False)

    # Factory flag under its current name and its historical plural name.
    # Both are nullable so an absent flag can be told apart from False.
    is_factory_preset: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    legacy_is_factory_presets: Mapped[Optional[bool]] = mapped_column(
        "is_factory_presets",
        Boolean,
        nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_presets_name"),
    )

    @property
    def factory_flag(self) -> bool:
        """Factory flag resolved across the current and legacy columns"""
        return normalize_factory_flag(self.is_factory_preset, self.legacy_is_factory_presets)

    def __repr__(self) -> str:
        return f"<Preset(id={self.id}, name='{self.name}', type='{self.type}')>"


class Sound(Base):
    """Named reference to an audio asset, owned by one preset"""
    __tablename__ = "sounds"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )

    # Owning preset; intentionally not a foreign key, orphans are never joined
    preset_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("preset_id", "name", name="uq_sounds_preset_name"),
        Index("idx_sounds_preset_id", "preset_id"),
    )

    def __repr__(self) -> str:
        return f"<Sound(id={self.id}, name='{self.name}', preset_id={self.preset_id})>"
