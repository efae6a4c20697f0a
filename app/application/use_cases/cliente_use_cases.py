# app/application/use_cases/cliente_use_cases.py (async version)

"""
Service for cliente management.

This module implements the business rules specific to clientes: lookup
by CPF, filtering by part of the name and the CPF uniqueness check on
creation. Generic CRUD rules are delegated to GenericService.
"""

import logging
from typing import List, Optional

from app.application.ports.inbound import IClienteUseCase
from app.application.ports.outbound import IClienteRepository
from app.application.use_cases.base_use_cases import GenericService
from app.domain.exceptions import (
    DomainException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
    InvalidInputException
)
from app.domain.models.cliente_domain_model import Cliente

logger = logging.getLogger(__name__)


class ClienteService(IClienteUseCase):
    """
    Service for cliente management.

    The CPF uniqueness check is check-then-insert and is not atomic against
    concurrent creators; the unique constraint on the cpf column closes
    that gap at the store level.
    """

    def __init__(self, repository: IClienteRepository):
        self.repository = repository
        self.generic = GenericService(repository, entity_name="Cliente")

    async def create(self, cliente: Optional[Cliente]) -> Cliente:
        """
        Creates a new cliente after checking that its CPF is not taken.
        """
        if cliente is None or cliente.cpf is None:
            raise InvalidInputException(
                detail="Cliente data and CPF must not be null for registration"
            )

        await self._validate_unique_cpf(cliente.cpf)
        return await self.generic.create(cliente)

    async def update(self, cliente: Optional[Cliente]) -> Cliente:
        return await self.generic.update(cliente)

    async def delete(self, cliente: Optional[Cliente]) -> None:
        await self.generic.delete(cliente)

    async def find_by_id(self, cliente_id: Optional[int]) -> Optional[Cliente]:
        return await self.generic.find_by_id(cliente_id)

    async def find_all(self) -> List[Cliente]:
        return await self.generic.find_all()

    async def find_by_cpf(self, cpf: Optional[int]) -> Optional[Cliente]:
        if cpf is None:
            raise InvalidInputException(detail="The CPF to search for must not be null")

        try:
            return await self.repository.find_by_cpf(cpf)

        except DomainException:
            raise

        except Exception as e:
            logger.exception(f"Error fetching cliente by CPF {cpf}")
            raise DatabaseOperationException(
                detail=f"Error fetching cliente by CPF {cpf}",
                original_error=e
            ) from e

    async def filter_by_nome(self, fragment: Optional[str]) -> List[Cliente]:
        """
        Lists clientes whose name contains the fragment, ignoring case.
        An empty (or missing) fragment matches every cliente.
        """
        try:
            return list(await self.repository.filter_by_nome(fragment or ""))

        except DomainException:
            raise

        except Exception as e:
            logger.exception(f"Error filtering clientes by name '{fragment}'")
            raise DatabaseOperationException(
                detail="Error filtering clientes by name",
                original_error=e
            ) from e

    async def _validate_unique_cpf(self, cpf: int) -> None:
        if await self.find_by_cpf(cpf) is not None:
            logger.warning(f"Attempt to register duplicate CPF: {cpf}")
            raise ResourceAlreadyExistsException(
                detail=f"CPF '{cpf}' is already registered; clientes with duplicate CPF are not allowed"
            )
