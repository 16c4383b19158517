"""Task ORM — one row per task in the `tasks` table.

Invariants:
    - id is a database-assigned serial primary key
    - descripcion is non-nullable text
    - is_finalizada defaults to False
    - registration_date is set once, on insert, and never updated

Design Decisions:
    - Column names kept in the existing table's vocabulary (descripcion, observacion,
      is_finalizada) so the API payload and the table share one set of names
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base


class Task(Base):
    """Task entity: a to-do item with a completion flag."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    descripcion: Mapped[str] = mapped_column(Text, nullable=False)
    observacion: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_finalizada: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} descripcion={self.descripcion!r}>"
