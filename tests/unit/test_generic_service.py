"""Testes das regras genéricas de CRUD."""

from __future__ import annotations

import pytest
from tests.fakes.in_memory_cliente_repository import (
    BrokenClienteRepository,
    InMemoryClienteRepository,
)

from app.application.use_cases.base_use_cases import GenericService
from app.domain.exceptions import (
    DatabaseOperationException,
    InvalidInputException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from app.domain.models.cliente_domain_model import Cliente


@pytest.fixture()
def generic(repository: InMemoryClienteRepository) -> GenericService:
    return GenericService(repository, entity_name="Cliente")


@pytest.mark.asyncio
async def test_create_assigns_identifier(generic: GenericService) -> None:
    created = await generic.create(Cliente(nome="Ana", cpf=12345))

    assert created.id is not None
    assert created.nome == "Ana"


@pytest.mark.asyncio
async def test_create_rejects_none(generic: GenericService) -> None:
    with pytest.raises(InvalidInputException):
        await generic.create(None)


@pytest.mark.asyncio
async def test_create_with_existing_identifier_is_a_conflict(generic: GenericService) -> None:
    created = await generic.create(Cliente(nome="Ana", cpf=12345))

    with pytest.raises(ResourceAlreadyExistsException):
        await generic.create(Cliente(id=created.id, nome="Outra", cpf=999))


@pytest.mark.asyncio
async def test_create_with_unknown_identifier_is_saved(
    generic: GenericService, repository: InMemoryClienteRepository
) -> None:
    created = await generic.create(Cliente(id=42, nome="Ana", cpf=12345))

    assert created.id == 42
    assert await repository.exists_by_id(42)


@pytest.mark.asyncio
async def test_update_missing_identifier_is_validation_error(generic: GenericService) -> None:
    with pytest.raises(InvalidInputException):
        await generic.update(Cliente(nome="Ana", cpf=12345))
    with pytest.raises(InvalidInputException):
        await generic.update(None)


@pytest.mark.asyncio
async def test_update_unknown_identifier_is_not_found(
    generic: GenericService, repository: InMemoryClienteRepository
) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await generic.update(Cliente(id=7, nome="Ana", cpf=12345))

    assert exc_info.value.resource_id == 7
    assert "save" not in repository.calls


@pytest.mark.asyncio
async def test_update_replaces_stored_entity(generic: GenericService) -> None:
    created = await generic.create(Cliente(nome="Ana", cpf=12345))
    created.nome = "Ana Paula"

    updated = await generic.update(created)

    assert updated == Cliente(id=created.id, nome="Ana Paula", cpf=12345)
    assert (await generic.find_by_id(created.id)).nome == "Ana Paula"


@pytest.mark.asyncio
async def test_delete_unknown_identifier_is_not_found(generic: GenericService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await generic.delete(Cliente(id=99, nome="Ana", cpf=12345))


@pytest.mark.asyncio
async def test_delete_without_identifier_is_validation_error(generic: GenericService) -> None:
    with pytest.raises(InvalidInputException):
        await generic.delete(Cliente(nome="Ana", cpf=12345))


@pytest.mark.asyncio
async def test_delete_removes_entity(generic: GenericService) -> None:
    created = await generic.create(Cliente(nome="Ana", cpf=12345))

    await generic.delete(created)

    assert await generic.find_by_id(created.id) is None


@pytest.mark.asyncio
async def test_find_by_id_absent_returns_none(generic: GenericService) -> None:
    assert await generic.find_by_id(123) is None


@pytest.mark.asyncio
async def test_find_by_id_none_is_validation_error(generic: GenericService) -> None:
    with pytest.raises(InvalidInputException):
        await generic.find_by_id(None)


@pytest.mark.asyncio
async def test_find_all_returns_every_entity(generic: GenericService) -> None:
    await generic.create(Cliente(nome="Ana", cpf=1))
    await generic.create(Cliente(nome="Bia", cpf=2))

    nomes = sorted(c.nome for c in await generic.find_all())

    assert nomes == ["Ana", "Bia"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.create(Cliente(nome="Ana", cpf=1)),
        lambda s: s.update(Cliente(id=1, nome="Ana", cpf=1)),
        lambda s: s.delete(Cliente(id=1, nome="Ana", cpf=1)),
        lambda s: s.find_by_id(1),
        lambda s: s.find_all(),
    ],
)
async def test_store_failures_are_wrapped(operation) -> None:
    cause = ConnectionError("store unavailable")
    generic = GenericService(BrokenClienteRepository(cause), entity_name="Cliente")

    with pytest.raises(DatabaseOperationException) as exc_info:
        await operation(generic)

    assert exc_info.value.original_error is cause
    assert exc_info.value.__cause__ is cause
