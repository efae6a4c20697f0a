# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from app.domain.models.cliente_domain_model import Cliente

T = TypeVar('T')
ID = TypeVar('ID')


class IGenericUseCase(Generic[T, ID], ABC):
    """Interface for the CRUD use cases shared by every entity."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Delete an existing entity."""
        pass

    @abstractmethod
    async def find_by_id(self, id: ID) -> Optional[T]:
        """Get entity by ID, or None when absent."""
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """List all entities."""
        pass


class IClienteUseCase(IGenericUseCase[Cliente, int], ABC):
    """Interface for cliente-related use cases."""

    @abstractmethod
    async def find_by_cpf(self, cpf: int) -> Optional[Cliente]:
        """Get cliente by CPF, or None when absent."""
        pass

    @abstractmethod
    async def filter_by_nome(self, fragment: Optional[str]) -> List[Cliente]:
        """Filter clientes by part of the name."""
        pass
