"""Schemas for historical draw records."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from lotto_report.records import MAX_NUMBER, MIN_NUMBER, PICK_COUNT, DrawRecord

_number = fields.Integer(validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))


class DrawRecordSchema(Schema):
    """Validate one ingested row and build a `DrawRecord`."""

    round = fields.Integer(required=True, validate=validate.Range(min=1))
    draw_date = fields.String(required=False, load_default="")
    first_prize_total = fields.Integer(required=False, load_default=0, validate=validate.Range(min=0))
    first_prize_winner_count = fields.Integer(required=False, load_default=0, validate=validate.Range(min=0))
    numbers = fields.List(_number, required=True, validate=validate.Length(equal=PICK_COUNT))
    bonus_number = fields.Integer(required=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))

    @validates_schema
    def _validate_numbers(self, data, **kwargs):  # type: ignore[no-untyped-def]
        numbers = data.get("numbers") or []
        if len(set(numbers)) != len(numbers):
            raise ValidationError({"numbers": ["Numbers must be unique"]})
        bonus = data.get("bonus_number")
        if bonus is not None and bonus in numbers:
            raise ValidationError({"bonus_number": ["Bonus number must differ from the main numbers"]})

    @post_load
    def _make_record(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return DrawRecord(
            round=int(data["round"]),
            draw_date=str(data.get("draw_date") or ""),
            first_prize_total=int(data.get("first_prize_total") or 0),
            first_prize_winner_count=int(data.get("first_prize_winner_count") or 0),
            numbers=tuple(int(n) for n in data["numbers"]),
            bonus_number=int(data["bonus_number"]),
        )


class DrawResponseSchema(Schema):
    round = fields.Integer()
    draw_date = fields.String()
    first_prize_total = fields.Integer()
    first_prize_winner_count = fields.Integer()
    numbers = fields.List(fields.Integer())
    sorted_numbers = fields.List(fields.Integer())
    bonus_number = fields.Integer()

    # Prize pool in units of 100 million won ("억"), as shown on the report card.
    first_prize_total_eok = fields.Method("_prize_in_eok")

    def _prize_in_eok(self, obj: DrawRecord) -> int:
        eok = Decimal(obj.first_prize_total) / Decimal(100_000_000)
        return int(eok.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CurrentDrawQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    index = fields.Integer(required=False, load_default=0, validate=validate.Range(min=0))


class DrawListQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    offset = fields.Integer(required=False, load_default=0, validate=validate.Range(min=0))
    limit = fields.Integer(required=False, load_default=20, validate=validate.Range(min=1, max=200))
