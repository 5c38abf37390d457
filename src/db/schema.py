"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    starting_position: Mapped[list[dict[str, Any]]] = mapped_column(JSON)
    starting_turn: Mapped[str]
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    redo_moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    notation: Mapped[list[str]] = mapped_column(JSON, default=list)
    position: Mapped[str]
    status: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
