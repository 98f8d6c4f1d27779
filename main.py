"""Process entrypoint: scrape once, then serve the results API.

Usage:
  python main.py                   # scrape, then listen on $PORT (3000)
  python main.py --scrape-only     # scrape and exit (status 1 on failure)
  python main.py --skip-scrape     # only serve what is already stored
  python main.py --from-json cards.json --scrape-only
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
from collections.abc import Sequence

from dotenv import load_dotenv
from marshmallow import ValidationError

from loterias import create_app
from loterias.config import get_config
from loterias.errors import AppError
from loterias.logging_config import configure_logging
from loterias.runner import run_scrape
from loterias.schemas.result_card import ResultCardSchema
from loterias.services.extractor import ResultCard


logger = logging.getLogger(__name__)

_cards_schema = ResultCardSchema(many=True)


def _load_cards(path: pathlib.Path) -> list[ResultCard]:
    with path.open(encoding="utf-8") as fh:
        return _cards_schema.load(json.load(fh))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape lottery results and serve them over HTTP")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--scrape-only", action="store_true", help="Run the scrape and exit")
    mode.add_argument("--skip-scrape", action="store_true", help="Start the server without scraping")
    parser.add_argument(
        "--from-json",
        dest="from_json",
        type=pathlib.Path,
        default=None,
        help="Store cards from a JSON file instead of visiting the page",
    )
    parser.add_argument("--host", dest="host", default="0.0.0.0")
    args = parser.parse_args(argv)
    if args.skip_scrape and args.from_json is not None:
        parser.error("--from-json cannot be combined with --skip-scrape")

    load_dotenv()
    config = get_config()
    configure_logging(config.LOG_LEVEL)

    scrape_ok = True
    if not args.skip_scrape:
        cards: list[ResultCard] | None = None
        if args.from_json is not None:
            try:
                cards = _load_cards(args.from_json)
            except (OSError, ValueError, ValidationError) as exc:
                logger.error("Could not read cards from %s: %s", args.from_json, exc)
                scrape_ok = False

        if scrape_ok:
            try:
                summary = run_scrape(config, cards=cards)
                logger.info("Scrape finished: %s new, %s already stored", summary.inserted, summary.duplicates)
            except AppError as exc:
                # Logged by the runner; the server still starts.
                scrape_ok = False
                logger.warning("Scrape failed (%s); serving stored results only", exc.code)

    if args.scrape_only:
        return 0 if scrape_ok else 1

    app = create_app(config)
    logger.info("Server listening on port %s", config.PORT)
    app.run(host=args.host, port=config.PORT, debug=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
