"""One scrape-and-persist run, executed at process start."""

from __future__ import annotations

import logging

from loterias.config import BaseConfig
from loterias.errors import ScrapeError, TransactionError
from loterias.services.extractor import ResultCard, ResultCardExtractor
from loterias.services.result_writer import ResultWriter, WriteSummary

logger = logging.getLogger(__name__)


def run_scrape(
    config: BaseConfig,
    extractor: ResultCardExtractor | None = None,
    writer: ResultWriter | None = None,
    cards: list[ResultCard] | None = None,
) -> WriteSummary:
    """Scrape the results page and store what is new.

    When `cards` is given the page is not visited and those cards are stored
    instead. Extraction errors abort before anything touches the database.

    Raises:
        ScrapeError: the page could not be loaded or never showed results.
        TransactionError: the write failed and was rolled back.
    """

    extractor = extractor or ResultCardExtractor(config.SCRAPER)
    writer = writer or ResultWriter()

    if cards is None:
        logger.info("Starting scrape...")
        try:
            cards = extractor.extract()
        except ScrapeError as exc:
            logger.error("Error while scraping: %s", exc)
            raise

    try:
        return writer.save(cards, config.DATABASE)
    except TransactionError as exc:
        logger.error("Scrape run aborted: %s", exc)
        raise
