# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import List, Optional, Generic, TypeVar

from app.domain.models.cliente_domain_model import Cliente

T = TypeVar('T')
ID = TypeVar('ID')


class IRepository(Generic[T, ID], ABC):
    """
    Generic storage interface.

    Each operation is atomic with respect to itself; no ordering,
    pagination or transaction semantics are implied.
    """

    @abstractmethod
    async def exists_by_id(self, id: ID) -> bool:
        """Check whether an entity with this ID is stored."""
        pass

    @abstractmethod
    async def find_by_id(self, id: ID) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """List every stored entity."""
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update an entity, returning it with its ID assigned."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Remove an entity."""
        pass


class IClienteRepository(IRepository[Cliente, int], ABC):
    """Cliente repository interface."""

    @abstractmethod
    async def find_by_cpf(self, cpf: int) -> Optional[Cliente]:
        """Get cliente by CPF."""
        pass

    @abstractmethod
    async def filter_by_nome(self, fragment: str) -> List[Cliente]:
        """List clientes whose name contains the fragment, ignoring case."""
        pass
