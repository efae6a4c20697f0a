"""
Casos de uso da aplicação.

GenericService concentra as regras de CRUD comuns; ClienteService acrescenta
as regras específicas do cadastro de clientes.
"""

from app.application.use_cases.base_use_cases import GenericService
from app.application.use_cases.cliente_use_cases import ClienteService

__all__ = [
    "GenericService",
    "ClienteService",
]
