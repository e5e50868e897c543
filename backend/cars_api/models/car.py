"""
Cars API Backend — Car SQLAlchemy Model
========================================

What:  ORM model representing the `cars` table.
Why:   Maps rows to Python objects for the SQL lookup provider.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Queried only by SqlAlchemyCarRepository. Rows are converted into
       immutable `Car` values before leaving the repository.

Table Design:
    - name: Primary key. Enforces "at most one car per name" in the store.
      Compared with `=`, so lookups are case-sensitive on PostgreSQL and SQLite.
    - type: Free-form classification ("hybrid", "sedan", ...).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from cars_api.database import Base


class CarRecord(Base):
    """Row in the `cars` table. Never returned to callers directly."""

    __tablename__ = "cars"

    name: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        comment="Car name, the lookup key (case-sensitive)",
    )

    type: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Free-form classification of the car",
    )

    def __repr__(self) -> str:
        return f"<CarRecord(name='{self.name}', type='{self.type}')>"
