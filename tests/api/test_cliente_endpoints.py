"""Testes dos endpoints de clientes, com o banco trocado por um SQLite temporário."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from app.adapters.outbound.persistence.database import get_db
from app.main import app

BASE = "/api/v1/clientes"


@pytest_asyncio.fixture()
async def client(session_factory):
    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(client: httpx.AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_create_and_fetch_cliente(client: httpx.AsyncClient) -> None:
    response = await client.post(BASE, json={"nome": "Ana", "cpf": "123.456.789-09"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] is not None
    assert body == {"id": body["id"], "nome": "Ana", "cpf": 12345678909}

    by_id = await client.get(f"{BASE}/{body['id']}")
    by_cpf = await client.get(f"{BASE}/cpf/123.456.789-09")
    assert by_id.json() == body
    assert by_cpf.json() == body


@pytest.mark.asyncio
async def test_duplicate_cpf_returns_conflict(client: httpx.AsyncClient) -> None:
    await client.post(BASE, json={"nome": "Ana", "cpf": 12345})

    response = await client.post(BASE, json={"nome": "Bia", "cpf": 12345})

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_missing_resources_return_not_found(client: httpx.AsyncClient) -> None:
    assert (await client.get(f"{BASE}/999")).status_code == 404
    assert (await client.get(f"{BASE}/cpf/55555")).status_code == 404
    assert (await client.delete(f"{BASE}/999")).status_code == 404

    response = await client.put(f"{BASE}/999", json={"nome": "Ana", "cpf": 1})
    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_malformed_cpf_in_path_is_bad_request(client: httpx.AsyncClient) -> None:
    response = await client.get(f"{BASE}/cpf/abc")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_invalid_body_is_rejected(client: httpx.AsyncClient) -> None:
    response = await client.post(BASE, json={"nome": "x" * 51, "cpf": 1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_filter_and_delete_flow(client: httpx.AsyncClient) -> None:
    created = (await client.post(BASE, json={"nome": "Ana", "cpf": 12345})).json()
    await client.post(BASE, json={"nome": "Maria Silva", "cpf": 67890})

    updated = await client.put(f"{BASE}/{created['id']}", json={"nome": "Ana Paula", "cpf": 12345})
    assert updated.status_code == 200
    assert updated.json()["nome"] == "Ana Paula"

    filtered = await client.get(f"{BASE}/filtrar", params={"nome": "SILVA"})
    assert [c["nome"] for c in filtered.json()] == ["Maria Silva"]
    assert (await client.get(f"{BASE}/filtrar", params={"nome": "zzz"})).json() == []
    assert len((await client.get(BASE)).json()) == 2

    deleted = await client.delete(f"{BASE}/{created['id']}")
    assert deleted.status_code == 204
    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_update_to_taken_cpf_returns_conflict(client: httpx.AsyncClient) -> None:
    await client.post(BASE, json={"nome": "Ana", "cpf": 12345})
    bia = (await client.post(BASE, json={"nome": "Bia", "cpf": 67890})).json()

    response = await client.put(f"{BASE}/{bia['id']}", json={"nome": "Bia", "cpf": 12345})

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"
    assert "ClienteModel" not in response.json()["detail"]
    assert (await client.get(f"{BASE}/{bia['id']}")).json()["cpf"] == 67890


@pytest.mark.asyncio
async def test_float_cpf_in_body_is_rejected(client: httpx.AsyncClient) -> None:
    response = await client.post(BASE, json={"nome": "Ana", "cpf": 1234.5})

    assert response.status_code == 422
    assert (await client.get(BASE)).json() == []


@pytest.mark.asyncio
async def test_filter_folds_accented_names(client: httpx.AsyncClient) -> None:
    await client.post(BASE, json={"nome": "JOSÉ CONCEIÇÃO", "cpf": 1})

    response = await client.get(f"{BASE}/filtrar", params={"nome": "josé"})

    assert [c["nome"] for c in response.json()] == ["JOSÉ CONCEIÇÃO"]
