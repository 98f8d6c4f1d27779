"""Tests for the deduplicating writer."""

from __future__ import annotations

import logging

import pytest
from sqlalchemy.exc import SQLAlchemyError

from loterias.errors import TransactionError
from loterias.repositories.lottery_result_repository import LotteryResultRepository
from loterias.services.extractor import PrizeResult, ResultCard
from loterias.services.result_writer import ResultWriter, WriteSummary

WRITER_LOGGER = "loterias.services.result_writer"


def _cards():
    return [
        ResultCard(
            title="Federal",
            time="14:00",
            results=[
                PrizeResult(prize="1", result="12345", group="12"),
                PrizeResult(prize="2", result="54321", group="06"),
            ],
        ),
        ResultCard(
            title="PT-RIO",
            time="11:00",
            results=[PrizeResult(prize="1º", result="1234", group="56")],
        ),
    ]


def test_save_inserts_every_prize_line(db_config, stored_rows):
    summary = ResultWriter().save(_cards(), db_config)

    assert summary == WriteSummary(inserted=3, duplicates=0)
    assert stored_rows() == [
        ("Federal", "14:00", "1", "12345", "12"),
        ("Federal", "14:00", "2", "54321", "06"),
        ("PT-RIO", "11:00", "1º", "1234", "56"),
    ]


def test_save_twice_stores_each_key_once(db_config, stored_rows):
    writer = ResultWriter()
    writer.save(_cards(), db_config)

    second = writer.save(_cards(), db_config)

    assert second == WriteSummary(inserted=0, duplicates=3)
    assert len(stored_rows()) == 3


def test_duplicate_key_keeps_first_result(db_config, stored_rows):
    writer = ResultWriter()
    writer.save([ResultCard("PT-RIO", "11:00", [PrizeResult("1º", "1234", "56")])], db_config)

    summary = writer.save([ResultCard("PT-RIO", "11:00", [PrizeResult("1º", "9999", "99")])], db_config)

    assert summary.inserted == 0
    assert stored_rows() == [("PT-RIO", "11:00", "1º", "1234", "56")]


def test_same_prize_different_time_is_not_a_duplicate(db_config, stored_rows):
    cards = [
        ResultCard("PT-RIO", "11:00", [PrizeResult("1º", "1234", "56")]),
        ResultCard("PT-RIO", "14:00", [PrizeResult("1º", "4321", "11")]),
    ]

    summary = ResultWriter().save(cards, db_config)

    assert summary == WriteSummary(inserted=2, duplicates=0)


def test_cards_without_results_commit_with_no_inserts(db_config, stored_rows):
    summary = ResultWriter().save([ResultCard("Federal", "19:00", [])], db_config)

    assert summary == WriteSummary(inserted=0, duplicates=0)
    assert stored_rows() == []


def test_second_run_logs_one_duplicate_notice(db_config, caplog):
    cards = [ResultCard("PT-RIO", "11:00", [PrizeResult("1º", "1234", "56")])]
    writer = ResultWriter()
    assert writer.save(cards, db_config).inserted == 1

    with caplog.at_level(logging.INFO, logger=WRITER_LOGGER):
        summary = writer.save(cards, db_config)

    assert summary == WriteSummary(inserted=0, duplicates=1)
    notices = [r.getMessage() for r in caplog.records if "Duplicate record found" in r.getMessage()]
    assert notices == ["Duplicate record found: PT-RIO, 11:00, 1º"]


class FailingRepository(LotteryResultRepository):
    """Fails on the n-th insert."""

    def __init__(self, fail_on: int) -> None:
        self.fail_on = fail_on
        self.calls = 0

    def add(self, session, **kwargs):
        self.calls += 1
        if self.calls == self.fail_on:
            raise SQLAlchemyError("connection reset")
        return super().add(session, **kwargs)


def test_failure_rolls_back_whole_run(db_config, stored_rows, caplog):
    writer = ResultWriter(repository=FailingRepository(fail_on=3))

    with caplog.at_level(logging.ERROR, logger=WRITER_LOGGER):
        with pytest.raises(TransactionError) as excinfo:
            writer.save(_cards(), db_config)

    assert excinfo.value.details == "connection reset"
    assert stored_rows() == []
    assert any("rolled back" in r.getMessage() for r in caplog.records)


def test_commit_outcome_is_logged(db_config, caplog):
    writer = ResultWriter()
    writer.save(_cards()[:1], db_config)

    with caplog.at_level(logging.INFO, logger=WRITER_LOGGER):
        writer.save(_cards(), db_config)

    messages = [r.getMessage() for r in caplog.records if r.name == WRITER_LOGGER]
    assert messages[-1] == "Results saved: 1 inserted, 2 duplicates skipped"
