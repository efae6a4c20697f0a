# app/domain/models/cliente_domain_model.py

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Capability required by the generic service: a nullable identifier."""
    id: Optional[Any]


@dataclass
class Cliente:
    """Domain model for a customer record."""
    NOME_MAX_LENGTH: ClassVar[int] = 50

    nome: str
    cpf: Optional[int]  # Business key, unique across all clientes
    id: Optional[int] = None  # Assigned by the store on first save
