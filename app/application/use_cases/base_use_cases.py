# app/application/use_cases/base_use_cases.py

"""
Serviço genérico de CRUD para as entidades da aplicação.

Este módulo define o serviço que aplica as regras comuns de cadastro,
alteração, exclusão e consulta sobre qualquer entidade que possua um
identificador, usando a interface de repositório como armazenamento.
"""

from typing import List, Optional, TypeVar
import logging

from app.application.ports.inbound import IGenericUseCase
from app.application.ports.outbound import IRepository
from app.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
    InvalidInputException
)
from app.domain.models.cliente_domain_model import Identifiable

# Configurar logger
logger = logging.getLogger(__name__)

# Define tipos genéricos para a entidade e seu identificador
EntityType = TypeVar("EntityType", bound=Identifiable)
IdType = TypeVar("IdType")


class GenericService(IGenericUseCase[EntityType, IdType]):
    """
    Serviço genérico, fornecendo operações CRUD comuns.

    As verificações de existência acontecem antes de cada mutação, de modo que
    cadastro nunca vira "upsert" e alteração/exclusão de registros inexistentes
    são sinalizadas independentemente da semântica do armazenamento.

    Serviços específicos compõem esta classe em vez de herdar dela.
    """

    def __init__(self, repository: IRepository[EntityType, IdType], entity_name: str = "Entidade"):
        """
        Inicializa o serviço com o repositório da entidade.

        Args:
            repository: Implementação da interface de armazenamento
            entity_name: Nome da entidade usado nas mensagens e logs
        """
        self.repository = repository
        self.entity_name = entity_name

    async def create(self, entity: Optional[EntityType]) -> EntityType:
        """
        Cadastra uma nova entidade.

        Args:
            entity: Entidade a ser cadastrada

        Returns:
            Entidade persistida, com o ID atribuído pelo armazenamento

        Raises:
            InvalidInputException: Se a entidade for nula
            ResourceAlreadyExistsException: Se a entidade já possuir um ID existente
            DatabaseOperationException: Em caso de erro no armazenamento
        """
        if entity is None:
            raise InvalidInputException(detail=f"Erro ao cadastrar: {self.entity_name} não pode ser nula")

        try:
            if entity.id is not None and await self.repository.exists_by_id(entity.id):
                error_msg = f"Erro ao cadastrar: {self.entity_name} com ID {entity.id} já existe"
                logger.warning(error_msg)
                raise ResourceAlreadyExistsException(detail=error_msg)

            saved = await self.repository.save(entity)
            logger.info(f"{self.entity_name} cadastrada com sucesso: ID {saved.id}")
            return saved

        except DomainException:
            raise

        except Exception as e:
            error_msg = f"Erro inesperado ao cadastrar {self.entity_name}"
            logger.exception(error_msg)
            raise DatabaseOperationException(detail=error_msg, original_error=e) from e

    async def update(self, entity: Optional[EntityType]) -> EntityType:
        """
        Altera uma entidade existente.

        Raises:
            InvalidInputException: Se a entidade ou seu ID forem nulos
            ResourceNotFoundException: Se a entidade não for encontrada
            DatabaseOperationException: Em caso de erro no armazenamento
        """
        if entity is None or entity.id is None:
            raise InvalidInputException(
                detail=f"Erro ao alterar: {self.entity_name} ou ID da entidade não podem ser nulos"
            )

        try:
            await self._ensure_exists(entity.id, "alterar")

            saved = await self.repository.save(entity)
            logger.info(f"{self.entity_name} atualizada com sucesso: ID {saved.id}")
            return saved

        except DomainException:
            raise

        except Exception as e:
            error_msg = f"Erro inesperado ao alterar {self.entity_name} com ID {entity.id}"
            logger.exception(error_msg)
            raise DatabaseOperationException(detail=error_msg, original_error=e) from e

    async def delete(self, entity: Optional[EntityType]) -> None:
        """
        Remove uma entidade existente.

        Raises:
            InvalidInputException: Se a entidade ou seu ID forem nulos
            ResourceNotFoundException: Se a entidade não for encontrada
            DatabaseOperationException: Em caso de erro no armazenamento
        """
        if entity is None or entity.id is None:
            raise InvalidInputException(
                detail=f"Erro ao excluir: {self.entity_name} ou ID da entidade não podem ser nulos"
            )

        try:
            await self._ensure_exists(entity.id, "excluir")

            await self.repository.delete(entity)
            logger.info(f"{self.entity_name} excluída com sucesso: ID {entity.id}")

        except DomainException:
            raise

        except Exception as e:
            error_msg = f"Erro inesperado ao excluir {self.entity_name} com ID {entity.id}"
            logger.exception(error_msg)
            raise DatabaseOperationException(detail=error_msg, original_error=e) from e

    async def find_by_id(self, entity_id: Optional[IdType]) -> Optional[EntityType]:
        """
        Consulta uma entidade pelo ID.

        Returns:
            Entidade encontrada ou None; ausência não é tratada como erro
        """
        if entity_id is None:
            raise InvalidInputException(detail="Erro ao consultar: o ID não pode ser nulo")

        try:
            return await self.repository.find_by_id(entity_id)

        except DomainException:
            raise

        except Exception as e:
            error_msg = f"Erro inesperado ao consultar {self.entity_name} com ID {entity_id}"
            logger.exception(error_msg)
            raise DatabaseOperationException(detail=error_msg, original_error=e) from e

    async def find_all(self) -> List[EntityType]:
        """Lista todas as entidades persistidas, sem ordem definida."""
        try:
            return list(await self.repository.find_all())

        except DomainException:
            raise

        except Exception as e:
            error_msg = f"Erro inesperado ao buscar todos os registros de {self.entity_name}"
            logger.exception(error_msg)
            raise DatabaseOperationException(detail=error_msg, original_error=e) from e

    async def _ensure_exists(self, entity_id: IdType, action: str) -> None:
        if not await self.repository.exists_by_id(entity_id):
            error_msg = f"Erro ao {action}: {self.entity_name} não encontrada"
            logger.warning(f"{error_msg} (ID: {entity_id})")
            raise ResourceNotFoundException(detail=error_msg, resource_id=entity_id)
