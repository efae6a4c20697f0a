"""create tb_cliente

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tb_cliente",
        sa.Column("id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(length=50), nullable=False),
        sa.Column("cpf", sa.BigInteger(), nullable=False),
    )
    # A unicidade do CPF fica garantida pelo banco
    op.create_index("ix_tb_cliente_cpf", "tb_cliente", ["cpf"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_tb_cliente_cpf", table_name="tb_cliente")
    op.drop_table("tb_cliente")
