"""Scraped lottery results, one row per prize.

Columns mirror the published cards:
- Titulo / Hora identify the card
- Premio / Resultado / Grupo are one prize line
- DataInsercao is assigned by the server on insert

(Titulo, Hora, Premio) is logically unique. The writer checks before it
inserts; the index below is not unique.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, Unicode, func
from sqlalchemy.orm import Mapped, mapped_column

from loterias.models.base import Base


class LotteryResult(Base):
    """One prize line of a published result card."""

    __tablename__ = "ResultadosLoteria"
    __table_args__ = (Index("ix_resultados_titulo_hora_premio", "Titulo", "Hora", "Premio"),)

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column("Titulo", Unicode(255), nullable=False)
    time: Mapped[str] = mapped_column("Hora", Unicode(50), nullable=False)
    prize: Mapped[str] = mapped_column("Premio", Unicode(100), nullable=False)
    result: Mapped[str | None] = mapped_column("Resultado", Unicode(255), nullable=True)
    group: Mapped[str | None] = mapped_column("Grupo", Unicode(100), nullable=True)

    inserted_at: Mapped[datetime] = mapped_column(
        "DataInsercao",
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
