# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

from abc import abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
import logging

from app.adapters.outbound.persistence.models.base_model import Base
from app.application.ports.outbound import IRepository
from app.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic type for domain entities
DomainType = TypeVar("DomainType")


class AsyncCRUDBase(IRepository[DomainType, Any], Generic[ModelType, DomainType]):
    """
    Async base class for implementing the Repository pattern.

    Implements the storage interface on top of an SQLAlchemy model,
    converting between ORM rows and domain entities. Includes consistent
    error handling and logging.

    Attributes:
        db: Async database session bound to this repository
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, db: AsyncSession, model: Type[ModelType], entity_name: Optional[str] = None):
        """
        Initialize the repository with a session and an SQLAlchemy model.

        Args:
            db: Async database session
            model: SQLAlchemy model class associated with this repository
            entity_name: Name used in error details returned to callers
        """
        self.db = db
        self.model = model
        self.entity_name = entity_name or model.__name__
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @abstractmethod
    def to_domain(self, db_obj: ModelType) -> DomainType:
        """Convert database model to domain model."""

    @abstractmethod
    def to_model(self, entity: DomainType) -> ModelType:
        """Convert domain model to a new database model instance."""

    async def exists_by_id(self, id: Any) -> bool:
        """
        Check if an entity exists with the given ID.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error checking existence of {self.entity_name}",
                original_error=e
            ) from e

    async def find_by_id(self, id: Any) -> Optional[DomainType]:
        """
        Get an entity by ID.

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.db.execute(query)
            db_obj = result.scalar_one_or_none()
            return self.to_domain(db_obj) if db_obj is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.entity_name}",
                original_error=e
            ) from e

    async def find_by_field(self, field_name: str, value: Any) -> Optional[DomainType]:
        """
        Get an entity by the value of a specific field.

        Args:
            field_name: Name of the field/column to filter
            value: Value to filter

        Returns:
            Entity found or None if it doesn't exist

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).where(getattr(self.model, field_name) == value)
            result = await self.db.execute(query)
            db_obj = result.scalar_one_or_none()
            return self.to_domain(db_obj) if db_obj is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with {field_name}={value}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.entity_name} by {field_name}",
                original_error=e
            ) from e

    async def find_all(self) -> List[DomainType]:
        """
        Get every stored entity.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            result = await self.db.execute(select(self.model))
            return [self.to_domain(db_obj) for db_obj in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.entity_name}s",
                original_error=e
            ) from e

    async def save(self, entity: DomainType) -> DomainType:
        """
        Insert a new entity (no ID yet) or update the stored one.

        Returns:
            Domain entity as persisted, carrying its ID

        Raises:
            ResourceAlreadyExistsException: If a uniqueness constraint is violated
            DatabaseOperationException: If another database error occurs
        """
        try:
            db_obj = self.to_model(entity)
            if db_obj.id is None:
                self.db.add(db_obj)
            else:
                db_obj = await self.db.merge(db_obj)

            await self.db.commit()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} saved with ID: {db_obj.id}")
            return self.to_domain(db_obj)

        except IntegrityError as e:
            await self.db.rollback()
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation saving {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.entity_name} with these data already exists"
                ) from e
            self.logger.error(f"Integrity error saving {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e) from e

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error saving {self.entity_name}",
                original_error=e
            ) from e

    async def delete(self, entity: DomainType) -> None:
        """
        Remove the stored row matching the entity's ID.

        Raises:
            DatabaseOperationException: If an error occurs during removal
        """
        try:
            db_obj = await self.db.get(self.model, entity.id)
            if db_obj is None:
                return

            await self.db.delete(db_obj)
            await self.db.commit()

            self.logger.info(f"{self.model.__name__} with ID {entity.id} removed")

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error removing {self.entity_name}",
                original_error=e
            ) from e
