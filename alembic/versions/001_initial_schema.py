"""Initial schema - property table.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "property",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        # Extracted fields are stored exactly as the model returned them
        sa.Column("address", postgresql.JSONB(), nullable=True),
        sa.Column("price", postgresql.JSONB(), nullable=True),
        sa.Column("bedrooms", postgresql.JSONB(), nullable=True),
        sa.Column("bathrooms", postgresql.JSONB(), nullable=True),
        sa.Column("car_spaces", postgresql.JSONB(), nullable=True),
        sa.Column("land_area_sqm", postgresql.JSONB(), nullable=True),
        sa.Column("house_area_sqm", postgresql.JSONB(), nullable=True),
        sa.Column("description", postgresql.JSONB(), nullable=True),
        sa.Column("features", postgresql.JSONB(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="imported"),
        sa.Column("source_pdf_name", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_property_user_id", "property", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_property_user_id", table_name="property")
    op.drop_table("property")
