# app/adapters/outbound/persistence/repositories/cliente_repository.py (async version)

"""
Repository for cliente operations.

This module implements the repository that performs database operations
related to clientes, implementing the IClienteRepository interface.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models.cliente_model import ClienteModel
from app.application.ports.outbound import IClienteRepository
from app.domain.models.cliente_domain_model import Cliente
from app.domain.exceptions import DatabaseOperationException


class AsyncClienteCRUD(AsyncCRUDBase[ClienteModel, Cliente], IClienteRepository):
    """
    Async implementation of CRUD repository for the Cliente entity.

    Extends AsyncCRUDBase with cliente-specific operations,
    such as lookup by CPF and filtering by part of the name.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, ClienteModel, entity_name="Cliente")

    async def find_by_cpf(self, cpf: int) -> Optional[Cliente]:
        """
        Find a cliente by CPF.

        Args:
            cpf: Cliente CPF (business key)

        Returns:
            Cliente found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        return await self.find_by_field("cpf", cpf)

    async def filter_by_nome(self, fragment: str) -> List[Cliente]:
        """
        List clientes whose name contains the fragment, ignoring case.

        Wildcards in the fragment are escaped, so '%' and '_' match literally.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(ClienteModel).where(
                func.lower(ClienteModel.nome).contains(fragment.lower(), autoescape=True)
            )
            result = await self.db.execute(query)
            return [self.to_domain(db_obj) for db_obj in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error filtering clientes by name '{fragment}': {str(e)}")
            raise DatabaseOperationException(
                detail="Error filtering clientes by name",
                original_error=e
            ) from e

    def to_domain(self, db_model: ClienteModel) -> Cliente:
        """
        Convert database model to domain model.

        Args:
            db_model: Cliente ORM model

        Returns:
            Domain model of cliente
        """
        return Cliente(
            id=db_model.id,
            nome=db_model.nome,
            cpf=db_model.cpf
        )

    def to_model(self, entity: Cliente) -> ClienteModel:
        return ClienteModel(
            id=entity.id,
            nome=entity.nome,
            cpf=entity.cpf
        )
