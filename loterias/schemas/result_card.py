"""Schemas for scraped cards saved to / replayed from JSON files."""

from __future__ import annotations

from marshmallow import Schema, fields, post_load

from loterias.services.extractor import PrizeResult, ResultCard


class PrizeResultSchema(Schema):
    prize = fields.Str(required=True)
    result = fields.Str(required=True)
    group = fields.Str(required=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return PrizeResult(**data)


class ResultCardSchema(Schema):
    title = fields.Str(required=True)
    time = fields.Str(required=True)
    results = fields.List(fields.Nested(PrizeResultSchema), load_default=list)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return ResultCard(**data)
