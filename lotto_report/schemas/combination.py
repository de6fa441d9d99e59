"""Schemas for generation requests, match checks and bookmarks."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from lotto_report.records import MAX_NUMBER, MIN_NUMBER, PICK_COUNT, GeneratedCombination


def _combination_field(**kwargs) -> fields.List:  # type: ignore[no-untyped-def]
    return fields.List(
        fields.Integer(validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER)),
        validate=validate.Length(equal=PICK_COUNT),
        **kwargs,
    )


def _require_unique(data: dict, key: str = "numbers") -> None:
    numbers = data.get(key) or []
    if len(set(numbers)) != len(numbers):
        raise ValidationError({key: ["Numbers must be unique"]})


class GeneratedCombinationSchema(Schema):
    """JSON shape of a generated set; also the persisted bookmark format."""

    class Meta:
        unknown = EXCLUDE

    id = fields.String(required=True, validate=validate.Length(min=1, max=100))
    numbers = _combination_field(required=True)
    total = fields.Integer(attribute="sum", data_key="sum", required=False, allow_none=True, load_default=None)
    reason = fields.String(required=False, load_default="")
    match_round = fields.Integer(
        data_key="matchRound",
        required=False,
        allow_none=True,
        load_default=None,
        validate=validate.Range(min=1),
    )

    @validates_schema
    def _validate_numbers(self, data, **kwargs):  # type: ignore[no-untyped-def]
        _require_unique(data)

    @post_load
    def _make_combination(self, data, **kwargs):  # type: ignore[no-untyped-def]
        # The sum is always derived; a stored/posted value is ignored.
        return GeneratedCombination.create(
            id=str(data["id"]),
            numbers=data["numbers"],
            reason=str(data.get("reason") or ""),
            match_round=data.get("match_round"),
        )


class GenerateRequestSchema(Schema):
    mode = fields.String(
        required=False,
        load_default="random",
        validate=validate.OneOf(["random", "ai", "sum"]),
    )

    count = fields.Integer(
        required=False,
        load_default=3,
        validate=validate.Range(min=1, max=50),
    )

    # Range feasibility is checked by the generator, not here.
    min_sum = fields.Integer(required=False, allow_none=True, load_default=None)
    max_sum = fields.Integer(required=False, allow_none=True, load_default=None)

    @validates_schema
    def _validate_bounds(self, data, **kwargs):  # type: ignore[no-untyped-def]
        has_min = data.get("min_sum") is not None
        has_max = data.get("max_sum") is not None
        if has_min != has_max:
            raise ValidationError({"max_sum" if has_min else "min_sum": ["min_sum and max_sum must be given together"]})


class MatchRequestSchema(Schema):
    numbers = _combination_field(required=True)

    @validates_schema
    def _validate_numbers(self, data, **kwargs):  # type: ignore[no-untyped-def]
        _require_unique(data)

