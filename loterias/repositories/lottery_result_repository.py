"""Repository layer for scraped result persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from loterias.models.lottery_result import LotteryResult


class LotteryResultRepository:
    """Queries against the ResultadosLoteria table."""

    def count_matching(self, session: Session, title: str, time: str, prize: str) -> int:
        """Rows already stored for one (title, time, prize) key."""

        stmt = (
            select(func.count())
            .select_from(LotteryResult)
            .where(
                LotteryResult.title == title,
                LotteryResult.time == time,
                LotteryResult.prize == prize,
            )
        )
        return int(session.scalar(stmt) or 0)

    def add(
        self,
        session: Session,
        *,
        title: str,
        time: str,
        prize: str,
        result: str,
        group: str,
    ) -> LotteryResult:
        row = LotteryResult(title=title, time=time, prize=prize, result=result, group=group)
        session.add(row)
        session.flush()  # assign PK, surface DB errors inside the transaction
        return row

    def list_latest_first(self, session: Session) -> Sequence[LotteryResult]:
        """All rows, newest time first, then newest insertion first.

        Rows saved by the same run share a timestamp; the id keeps them in
        the order they were scraped.
        """

        stmt = select(LotteryResult).order_by(
            LotteryResult.time.desc(),
            LotteryResult.inserted_at.desc(),
            LotteryResult.id.asc(),
        )
        return list(session.scalars(stmt).all())
