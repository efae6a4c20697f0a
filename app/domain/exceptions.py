# app/domain/exceptions.py

"""
Exceções de domínio da aplicação.

Este módulo define exceções puras (sem dependência de HTTP) que carregam
um código interno. A tradução para códigos de status HTTP é feita pelo
middleware de exceções.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Exceção base para todas as exceções do domínio.

    Attributes:
        detail: Mensagem descritiva do erro
        internal_code: Código interno usado para mapear a resposta
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(self, detail: Any = None, internal_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if internal_code is not None:
            self.internal_code = internal_code

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Recurso não encontrado."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Recurso não encontrado", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Recurso já existe."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Recurso já existe", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class DatabaseOperationException(DomainException):
    """Erro na operação de banco de dados."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}")
        self.original_error = original_error


class InvalidInputException(DomainException):
    """Dados de entrada inválidos."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Dados de entrada inválidos", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(detail=f"{detail}{field_errors}")
        self.details = fields or {}
