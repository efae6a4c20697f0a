# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access and use cases.
"""

import logging
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import get_db
from app.adapters.outbound.persistence.repositories.cliente_repository import AsyncClienteCRUD
from app.application.ports.inbound import IClienteUseCase
from app.application.use_cases.cliente_use_cases import ClienteService

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

# Alias used by the use case dependencies
get_db_session = get_db


########################################################################
# Use Cases
########################################################################

async def get_cliente_service(
        db: AsyncSession = Depends(get_db_session),
) -> IClienteUseCase:
    """
    Build the cliente use case bound to the request's session.

    Args:
        db: Async database session

    Returns:
        ClienteService backed by the SQLAlchemy repository
    """
    return ClienteService(AsyncClienteCRUD(db))
