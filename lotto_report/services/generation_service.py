"""Turn sampled numbers into labelled combinations annotated with past wins."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from lotto_report.errors import ValidationError
from lotto_report.records import GeneratedCombination, SumRange
from lotto_report.services.combination_generator import CombinationGenerator
from lotto_report.services.history_matcher import HistoryMatcher


class GenerationMode(str, Enum):
    RANDOM = "random"
    AI = "ai"
    SUM = "sum"


REASON_LABELS: dict[GenerationMode, str] = {
    GenerationMode.RANDOM: "random",
    GenerationMode.AI: "ai",
    GenerationMode.SUM: "sum-range",
}

DEFAULT_SUM_RANGE = SumRange(min_sum=100, max_sum=170)
DEFAULT_COUNT = 3
MAX_COUNT = 50


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class GenerationService:
    """Generate combinations for one of the UI modes.

    "ai" is only a label; it samples exactly like "random".
    """

    def __init__(
        self,
        generator: CombinationGenerator | None = None,
        clock: Callable[[], int] = _epoch_ms,
    ) -> None:
        self._generator = generator or CombinationGenerator()
        self._clock = clock

    def generate(
        self,
        matcher: HistoryMatcher,
        mode: str = GenerationMode.RANDOM.value,
        count: int = DEFAULT_COUNT,
        min_sum: int | None = None,
        max_sum: int | None = None,
    ) -> list[GeneratedCombination]:
        try:
            gen_mode = GenerationMode(mode)
        except ValueError as exc:
            raise ValidationError(
                message="Invalid mode",
                details={"mode": ["Must be one of random|ai|sum"]},
            ) from exc

        if count < 1 or count > MAX_COUNT:
            raise ValidationError(
                message="Invalid count",
                details={"count": [f"Must be between 1 and {MAX_COUNT}"]},
            )

        constraints: SumRange | None = None
        if min_sum is not None and max_sum is not None:
            constraints = SumRange(min_sum=int(min_sum), max_sum=int(max_sum))
        elif gen_mode is GenerationMode.SUM:
            constraints = DEFAULT_SUM_RANGE

        picks = self._generator.generate(count, constraints)

        stamp = self._clock()
        reason = REASON_LABELS[gen_mode]
        return [
            GeneratedCombination.create(
                id=f"{gen_mode.value}-{stamp}-{i}",
                numbers=numbers,
                reason=reason,
                match_round=matcher.find_match(numbers),
            )
            for i, numbers in enumerate(picks)
        ]
