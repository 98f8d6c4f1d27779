"""Results API."""

from __future__ import annotations

from flask import Blueprint

from loterias.db import get_session
from loterias.schemas.results import GroupedCardSchema
from loterias.services.result_query_service import ResultQueryService
from loterias.utils.responses import ok


results_bp = Blueprint("results", __name__)

_service = ResultQueryService()
_schema = GroupedCardSchema(many=True)


@results_bp.get("/results")
def list_results():
    """Every stored card, latest time first."""

    session = get_session()
    cards = _service.list_grouped(session)
    return ok(_schema.dump(cards))
