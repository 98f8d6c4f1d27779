"""Rebuild result cards from stored prize lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from loterias.errors import QueryError
from loterias.repositories.lottery_result_repository import LotteryResultRepository

DAY_FORMAT = "%d/%m/%Y"


class CardKey(NamedTuple):
    title: str
    time: str


@dataclass(frozen=True)
class GroupedResult:
    prize: str
    result: str | None
    group: str | None


@dataclass
class GroupedCard:
    title: str
    time: str
    day: str | None
    results: list[GroupedResult] = field(default_factory=list)


class ResultQueryService:
    """Read side of the results store. Never writes."""

    def __init__(self, repository: LotteryResultRepository | None = None) -> None:
        self._repo = repository or LotteryResultRepository()

    def list_grouped(self, session: Session) -> list[GroupedCard]:
        """All stored results as cards, latest time first.

        Cards come out in the order their first row was fetched; prize lines
        keep fetch order inside each card. The card's day is the insertion
        date of that first row.
        """

        try:
            rows = self._repo.list_latest_first(session)
        except SQLAlchemyError as exc:
            raise QueryError(details=str(exc)) from exc

        cards: dict[CardKey, GroupedCard] = {}
        for row in rows:
            key = CardKey(row.title, row.time)
            card = cards.get(key)
            if card is None:
                day = row.inserted_at.strftime(DAY_FORMAT) if row.inserted_at else None
                card = cards[key] = GroupedCard(title=row.title, time=row.time, day=day)
            card.results.append(GroupedResult(prize=row.prize, result=row.result, group=row.group))

        return list(cards.values())
