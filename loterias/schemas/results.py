"""Marshmallow schemas for the /results payload."""

from __future__ import annotations

from marshmallow import Schema, fields


class GroupedResultSchema(Schema):
    prize = fields.Str(data_key="Premio")
    result = fields.Str(data_key="Resultado", allow_none=True)
    group = fields.Str(data_key="Grupo", allow_none=True)


class GroupedCardSchema(Schema):
    """Serialize GroupedCard with the column names the frontend reads."""

    title = fields.Str(data_key="Titulo")
    time = fields.Str(data_key="Hora")
    day = fields.Str(data_key="Dia", allow_none=True)
    results = fields.List(fields.Nested(GroupedResultSchema), data_key="Resultados")
