# app/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções e os modelos do domínio.
"""

# Exportar todas as exceções para facilitar a importação
from app.domain.exceptions import (
    DomainException,               # Exceção base pura do domínio
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
    InvalidInputException,
)

# Exportar modelos
from app.domain.models.cliente_domain_model import Cliente, Identifiable
