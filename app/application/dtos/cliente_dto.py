# app/application/dtos/cliente_dto.py

"""
Schemas para dados de cliente.

Este módulo define os dtos Pydantic para validação e serialização
dos dados de clientes expostos pela API.
"""

from typing import Optional

from pydantic import Field, field_validator

from app.application.dtos.base_dto import CustomBaseModel
from app.domain.models.cliente_domain_model import Cliente
from app.shared.utils.input_validation import InputValidator


class ClienteBase(CustomBaseModel):
    """
    Schema base para dados de cliente.

    Contém os atributos comuns a todos os dtos de cliente.
    """
    nome: str = Field(..., description="Nome do cliente")
    cpf: int = Field(..., description="CPF do cliente; aceita máscara (ex: 123.456.789-09)")

    @field_validator("nome")
    def validate_nome(cls, v: str) -> str:
        nome = InputValidator.sanitize_name(v)
        valid, error = InputValidator.validate_name(nome)
        if not valid:
            raise ValueError(error)
        return nome

    @field_validator("cpf", mode="before")
    def validate_cpf(cls, v):
        return InputValidator.parse_cpf(v)


class ClienteCreate(ClienteBase):
    """Schema para cadastro de cliente."""

    def to_domain(self) -> Cliente:
        return Cliente(nome=self.nome, cpf=self.cpf)


class ClienteUpdate(ClienteBase):
    """
    Schema para alteração de cliente.

    O ID vem da URL e prevalece sobre qualquer valor do corpo.
    """

    def to_domain(self, cliente_id: int) -> Cliente:
        return Cliente(id=cliente_id, nome=self.nome, cpf=self.cpf)


class ClienteOutput(CustomBaseModel):
    """Schema para retorno de dados de cliente."""
    id: Optional[int] = Field(None, description="Identificador atribuído pelo banco")
    nome: str
    cpf: int
