"""
Base Repository
Common store access and error taxonomy for all catalog entities
"""

import uuid
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..connection import Base

# Type variable for generic repository
ModelType = TypeVar("ModelType", bound=Base)


class RepositoryError(Exception):
    """Base repository error"""
    pass


class ValidationError(RepositoryError):
    """Required input missing or empty"""
    pass


class NotFoundError(RepositoryError):
    """Entity not found error"""
    pass


class ConflictError(RepositoryError):
    """Uniqueness constraint would be violated"""
    pass


class StoreError(RepositoryError):
    """Underlying data-access failure"""
    pass


class BaseRepository(Generic[ModelType]):
    """Base repository with common store operations"""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def execute(
        self,
        statement,
        operation: str,
        conflict_message: Optional[str] = None
    ):
        """
        Execute a statement, translating store failures

        A unique constraint violation becomes ConflictError carrying
        conflict_message; any other SQLAlchemy failure becomes StoreError.
        """
        try:
            return await self.session.execute(statement)
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(conflict_message or f"Data conflict: {str(e)}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"Error {operation}: {str(e)}") from e

    async def create(self, conflict_message: Optional[str] = None, **fields: Any) -> ModelType:
        """Create a new entity"""
        db_obj = self.model(**fields)
        try:
            self.session.add(db_obj)
            await self.session.flush()
            await self.session.refresh(db_obj)
            return db_obj

        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(conflict_message or f"Data conflict: {str(e)}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"Error creating {self.model.__name__}: {str(e)}") from e

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        """Get entity by ID"""
        result = await self.execute(
            select(self.model).where(self.model.id == id),
            f"getting {self.model.__name__}"
        )
        return result.scalar_one_or_none()

    async def get_multi(self, filters: Optional[Dict[str, Any]] = None) -> List[ModelType]:
        """Get every entity matching the optional equality filters, in store order"""
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    column = getattr(self.model, field)
                    if isinstance(value, list):
                        query = query.where(column.in_(value))
                    else:
                        query = query.where(column == value)

        result = await self.execute(query, f"listing {self.model.__name__}")
        return list(result.scalars().all())

    async def commit(self, operation: str) -> None:
        """Commit the unit of work so a failed write surfaces before any reply"""
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"Data conflict: {str(e)}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"Error committing {operation}: {str(e)}") from e
