"""Create cars table

Revision ID: 001
Revises: None
Create Date: 2020-05-28 00:00:00.000000+00:00

What:  Creates the `cars` table read by SqlAlchemyCarRepository.
How:   `name` is the primary key, so the store can hold at most one car per name.

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the cars table. Column docs live in cars_api/models/car.py."""
    op.create_table(
        "cars",

        # Lookup key, case-sensitive
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Car name, the lookup key (case-sensitive)",
        ),

        sa.Column(
            "type",
            sa.String(255),
            nullable=False,
            comment="Free-form classification of the car",
        ),

        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    """Drop the cars table. All car data is permanently lost."""
    op.drop_table("cars")
