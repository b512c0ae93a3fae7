"""Database tables / schema"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board: Mapped[list[list[str]]] = mapped_column(JSON)
    current_player: Mapped[str]
    status: Mapped[str] = mapped_column(index=True)
    # Timestamps are set by the domain layer (on creation and after every move), not by the database.
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
