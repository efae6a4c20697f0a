# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import cliente_endpoint

api_router = APIRouter()

# Incluir os routers dos endpoints
api_router.include_router(cliente_endpoint.router, prefix="/clientes", tags=["Clientes"])
