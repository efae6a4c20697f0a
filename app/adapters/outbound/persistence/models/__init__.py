# app/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

# Importar Base
from app.adapters.outbound.persistence.models.base_model import Base

# Importar modelos principais
from app.adapters.outbound.persistence.models.cliente_model import ClienteModel

# Exportar todos os modelos
__all__ = [
    # Base
    "Base",

    # Modelos principais
    "ClienteModel",
]
