# app/adapters/inbound/api/v1/endpoints/cliente_endpoint.py

"""
Endpoints para gerenciamento de clientes.

Este módulo contém as rotas de cadastro, consulta, filtro, alteração e
exclusão de clientes. Os erros de domínio são propagados e convertidos
em respostas HTTP pelo middleware de exceções.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.adapters.inbound.api.deps import get_cliente_service
from app.application.dtos.cliente_dto import ClienteCreate, ClienteOutput, ClienteUpdate
from app.application.ports.inbound import IClienteUseCase
from app.domain.exceptions import InvalidInputException, ResourceNotFoundException
from app.domain.models.cliente_domain_model import Cliente
from app.shared.utils.input_validation import InputValidator

# Configurar logging
logger = logging.getLogger(__name__)

router = APIRouter()


def _require(cliente: Optional[Cliente], detail: str, resource_id=None) -> Cliente:
    if cliente is None:
        raise ResourceNotFoundException(detail=detail, resource_id=resource_id)
    return cliente


@router.post("", response_model=ClienteOutput, status_code=status.HTTP_201_CREATED)
async def cadastrar_cliente(
        data: ClienteCreate,
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """
    Cadastra um novo cliente.

    Retorna 409 se o CPF já estiver cadastrado.
    """
    return await service.create(data.to_domain())


@router.get("", response_model=List[ClienteOutput])
async def buscar_todos_clientes(
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """Lista todos os clientes."""
    return await service.find_all()


@router.get("/filtrar", response_model=List[ClienteOutput])
async def filtrar_clientes(
        nome: str = Query("", description="Parte do nome do cliente (sem distinção de maiúsculas)"),
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """
    Filtra clientes por parte do nome.

    A lista pode ser vazia; nunca retorna 404.
    """
    return await service.filter_by_nome(nome)


@router.get("/cpf/{cpf}", response_model=ClienteOutput)
async def buscar_cliente_por_cpf(
        cpf: str,
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """Busca um cliente pelo CPF, com ou sem máscara."""
    try:
        cpf_value = InputValidator.parse_cpf(cpf)
    except ValueError as e:
        raise InvalidInputException(fields={"cpf": str(e)}) from e

    cliente = await service.find_by_cpf(cpf_value)
    return _require(cliente, f"Cliente com CPF {cpf_value} não encontrado")


@router.get("/{cliente_id}", response_model=ClienteOutput)
async def buscar_cliente_por_id(
        cliente_id: int,
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """Busca um cliente pelo ID."""
    cliente = await service.find_by_id(cliente_id)
    return _require(cliente, "Cliente não encontrado", resource_id=cliente_id)


@router.put("/{cliente_id}", response_model=ClienteOutput)
async def atualizar_cliente(
        cliente_id: int,
        data: ClienteUpdate,
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """
    Atualiza um cliente existente.

    O ID da URL é usado para a alteração.
    """
    return await service.update(data.to_domain(cliente_id))


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
async def excluir_cliente(
        cliente_id: int,
        service: IClienteUseCase = Depends(get_cliente_service),
):
    """Exclui um cliente."""
    cliente = await service.find_by_id(cliente_id)
    await service.delete(_require(cliente, "Cliente não encontrado", resource_id=cliente_id))
    logger.info(f"Cliente {cliente_id} excluído via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
