from __future__ import annotations

from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class Station(Base):
    __tablename__ = "station"

    # 24-char hex object id assigned by StationStore, never by the client
    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    freq: Mapped[float] = mapped_column(Float, nullable=False)
    actual: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"Station(id={self.id!r}, name={self.name!r}, freq={self.freq!r}, actual={self.actual!r})"
