"""Persist scraped cards, skipping prize lines that are already stored."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from loterias.config import DatabaseConfig
from loterias.db import create_app_engine, create_tables, session_scope
from loterias.errors import TransactionError
from loterias.repositories.lottery_result_repository import LotteryResultRepository
from loterias.services.extractor import ResultCard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteSummary:
    inserted: int
    duplicates: int


class ResultWriter:
    """Deduplicating writer.

    Every (card, prize) pair of a run is checked and inserted inside a single
    transaction, so a run either lands completely or not at all.

    The existence check and the insert are two statements; two writers
    running at once could both insert the same key. Only one run is started
    per process.
    """

    def __init__(self, repository: LotteryResultRepository | None = None) -> None:
        self._repo = repository or LotteryResultRepository()

    def save(self, cards: Iterable[ResultCard], db_config: DatabaseConfig) -> WriteSummary:
        """Store every prize line of `cards` not already present.

        Raises:
            TransactionError: anything failed; nothing was committed.
        """

        engine = create_app_engine(db_config)
        inserted = 0
        duplicates = 0
        try:
            create_tables(engine)
            with session_scope(engine) as session:
                for card in cards:
                    for line in card.results:
                        if self._repo.count_matching(session, card.title, card.time, line.prize):
                            duplicates += 1
                            logger.info(
                                "Duplicate record found: %s, %s, %s",
                                card.title,
                                card.time,
                                line.prize,
                            )
                            continue

                        self._repo.add(
                            session,
                            title=card.title,
                            time=card.time,
                            prize=line.prize,
                            result=line.result,
                            group=line.group,
                        )
                        inserted += 1
        except Exception as exc:
            logger.exception("Error saving results to the database; transaction rolled back")
            raise TransactionError(details=str(exc)) from exc
        finally:
            engine.dispose()

        logger.info("Results saved: %s inserted, %s duplicates skipped", inserted, duplicates)
        return WriteSummary(inserted=inserted, duplicates=duplicates)
