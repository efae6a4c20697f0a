# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
CRUD (Create, Read, Update, Delete) module.

This module exports the repository classes for the system entities,
implementing the Repository pattern. Repositories are bound to a
session, so instances are built per request.
"""

# Import CRUD classes
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.cliente_repository import AsyncClienteCRUD

# Export all classes
__all__ = [
    "AsyncCRUDBase",
    "AsyncClienteCRUD",
]
