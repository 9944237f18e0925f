"""Seed the products table with the initial catalog.

Rows are inserted with explicit ids, so on PostgreSQL the products_id_seq
sequence is moved past them afterwards.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op
from catalog.init_db import SEED_PRODUCTS

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


products_table = sa.table(
    "products",
    sa.column("id", sa.Integer()),
    sa.column("name", sa.String()),
    sa.column("description", sa.Text()),
    sa.column("price", sa.Numeric(18, 2)),
)


def upgrade() -> None:
    """Insert the seed products."""
    op.bulk_insert(products_table, SEED_PRODUCTS)

    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            sa.text(
                "SELECT setval('products_id_seq', "
                "COALESCE((SELECT MAX(id) FROM products), 0) + 1, false)"
            )
        )


def downgrade() -> None:
    """Delete the seed products."""
    seed_ids = [row["id"] for row in SEED_PRODUCTS]
    op.execute(products_table.delete().where(products_table.c.id.in_(seed_ids)))
