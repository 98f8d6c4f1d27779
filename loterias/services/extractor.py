"""Extract result cards from the rendered results page.

The page is rendered with Playwright (the cards are filled in by JavaScript)
and the resulting HTML is mapped to records with BeautifulSoup. The mapping
depends on the page's markup:

    .results__card
        .results__card--header > span          -> time
        .results__card--title span             -> title
        tbody tr
            td (first)                         -> prize
            .results__table-align-results      -> result
            .results__table-grupo span         -> group
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from loterias.config import ScraperConfig
from loterias.errors import NavigationError, ScrapeTimeoutError

logger = logging.getLogger(__name__)

CARD_SELECTOR = ".results__card"
TITLE_SELECTOR = ".results__card--title span"
TIME_SELECTOR = ".results__card--header > span"
ROW_SELECTOR = "tbody tr"
PRIZE_SELECTOR = "td"
RESULT_SELECTOR = ".results__table-align-results"
GROUP_SELECTOR = ".results__table-grupo span"

MISSING_TITLE = "Título não encontrado"
MISSING_TIME = "Hora não encontrada"
MISSING_PRIZE = "Prêmio não encontrado"
MISSING_RESULT = "(sem dados)"
MISSING_GROUP = "Grupo não encontrado"


@dataclass(frozen=True)
class PrizeResult:
    prize: str
    result: str
    group: str


@dataclass(frozen=True)
class ResultCard:
    title: str
    time: str
    results: list[PrizeResult] = field(default_factory=list)


# Tags that start a new line in the rendered page; inline tags join directly.
_BREAK_TAGS = frozenset({"br", "div", "p", "li", "tr", "td", "th", "table", "ul", "ol"})


def _text(el: Tag | None) -> str | None:
    """Rendered text of an element with whitespace runs collapsed."""

    if el is None:
        return None

    parts: list[str] = []
    for node in el.descendants:
        if isinstance(node, Tag):
            if node.name in _BREAK_TAGS:
                parts.append(" ")
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(str(node))
    return " ".join("".join(parts).split())


def _parse_row(row: Tag) -> PrizeResult | None:
    prize = _text(row.select_one(PRIZE_SELECTOR))
    if prize is None:
        prize = MISSING_PRIZE
    elif not prize:
        # Spacer rows have an empty first cell.
        return None

    result = _text(row.select_one(RESULT_SELECTOR))
    group = _text(row.select_one(GROUP_SELECTOR))

    return PrizeResult(
        prize=prize,
        result=result if result is not None else MISSING_RESULT,
        group=group if group is not None else MISSING_GROUP,
    )


def _parse_card(card: Tag) -> ResultCard:
    title = _text(card.select_one(TITLE_SELECTOR))
    time = _text(card.select_one(TIME_SELECTOR))

    results: list[PrizeResult] = []
    for row in card.select(ROW_SELECTOR):
        parsed = _parse_row(row)
        if parsed is not None:
            results.append(parsed)

    return ResultCard(
        title=title if title is not None else MISSING_TITLE,
        time=time if time is not None else MISSING_TIME,
        results=results,
    )


def parse_cards(html: str) -> list[ResultCard]:
    """Map every result card in a rendered page to a ResultCard."""

    soup = BeautifulSoup(html, "lxml")
    return [_parse_card(card) for card in soup.select(CARD_SELECTOR)]


class ResultCardExtractor:
    """Load the results page in headless Chromium and extract its cards."""

    def __init__(
        self,
        config: ScraperConfig | None = None,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ) -> None:
        self._config = config or ScraperConfig()
        self._playwright_factory = playwright_factory

    def _render(self, p: Any, url: str) -> str:
        browser = p.chromium.launch(headless=self._config.headless)
        try:
            page = browser.new_page()
            # Readiness is decided by the card selector wait, not by network idle.
            try:
                page.goto(url, wait_until="load")
            except PlaywrightError as exc:
                raise NavigationError(details=f"{url}: {exc}") from exc

            try:
                page.wait_for_selector(CARD_SELECTOR, timeout=self._config.selector_timeout_ms)
            except PlaywrightTimeoutError as exc:
                raise ScrapeTimeoutError(
                    details=f"{CARD_SELECTOR} not found after {self._config.selector_timeout_ms} ms"
                ) from exc

            return page.content()
        finally:
            browser.close()

    def extract(self, url: str | None = None) -> list[ResultCard]:
        """Return the cards currently published at `url`.

        Raises:
            NavigationError: the page (or the browser) could not be loaded.
            ScrapeTimeoutError: no result card appeared within the wait.
        """

        target = url or self._config.url
        logger.info("Scraping %s", target)

        try:
            with self._playwright_factory() as p:
                html = self._render(p, target)
        except PlaywrightError as exc:
            # Browser start-up, page creation or a crashed page.
            raise NavigationError(details=str(exc)) from exc

        cards = parse_cards(html)
        logger.info(
            "Collected %s cards (%s prize lines)",
            len(cards),
            sum(len(c.results) for c in cards),
        )
        logger.debug("Collected data: %s", cards)
        return cards
