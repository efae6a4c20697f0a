# app/adapters/outbound/persistence/models/cliente_model.py

"""
Modelo de cliente persistido.

Este módulo define o modelo ClienteModel que representa a tabela de
clientes. O CPF carrega uma restrição de unicidade no próprio banco.
"""

from sqlalchemy import Column, BigInteger, Integer, String

from app.adapters.outbound.persistence.models.base_model import Base


class ClienteModel(Base):
    """
    Modelo que representa um cliente cadastrado.

    Attributes:
        id: Identificador único atribuído pelo banco
        nome: Nome do cliente
        cpf: CPF do cliente (chave de negócio, único)
    """
    __tablename__ = "tb_cliente"

    # BigInteger sem variante Integer não recebe autoincremento no SQLite
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    nome = Column(String(50), nullable=False)
    cpf = Column(BigInteger, unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        """Representação em string do objeto ClienteModel."""
        return f"<ClienteModel(id={self.id}, cpf={self.cpf})>"
