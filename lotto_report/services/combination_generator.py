"""Random 6/45 combination sampling with an optional sum range."""

from __future__ import annotations

import logging
import random

from lotto_report.errors import GenerationInfeasibleError, ValidationError
from lotto_report.records import (
    MAX_ACHIEVABLE_SUM,
    MAX_NUMBER,
    MIN_ACHIEVABLE_SUM,
    MIN_NUMBER,
    PICK_COUNT,
    SumRange,
)

logger = logging.getLogger(__name__)


class CombinationGenerator:
    """Draw sorted combinations of 6 distinct numbers from 1..45.

    Sampling is pure: no ids, labels or history lookups happen here. Pass a
    seeded `random.Random` for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None, max_attempts: int = 10_000) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self._rng = rng or random.Random()
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def sample(self) -> list[int]:
        """One combination by rejection sampling.

        Each number is drawn uniformly from 1..45; a number already picked is
        discarded and drawn again until six distinct numbers are collected.
        """

        picked: set[int] = set()
        while len(picked) < PICK_COUNT:
            picked.add(self._rng.randint(MIN_NUMBER, MAX_NUMBER))
        return sorted(picked)

    def generate(self, count: int, constraints: SumRange | None = None) -> list[list[int]]:
        if count < 1:
            raise ValidationError(
                message="Invalid count",
                details={"count": ["Must be >= 1"]},
            )

        if constraints is not None and not constraints.is_feasible():
            raise GenerationInfeasibleError(
                message=(
                    f"Sum range {constraints.min_sum}..{constraints.max_sum} is not achievable "
                    f"(possible sums are {MIN_ACHIEVABLE_SUM}..{MAX_ACHIEVABLE_SUM})"
                ),
                details={"min_sum": constraints.min_sum, "max_sum": constraints.max_sum},
            )

        return [self._generate_one(constraints) for _ in range(int(count))]

    def _generate_one(self, constraints: SumRange | None) -> list[int]:
        if constraints is None:
            return self.sample()

        for _ in range(self._max_attempts):
            candidate = self.sample()
            if constraints.contains(sum(candidate)):
                return candidate

        logger.info(
            "Sum range %s..%s not hit within %s attempts",
            constraints.min_sum,
            constraints.max_sum,
            self._max_attempts,
        )
        raise GenerationInfeasibleError(
            message=f"Failed to generate a combination within retry limit ({self._max_attempts})",
            details={
                "min_sum": constraints.min_sum,
                "max_sum": constraints.max_sum,
                "attempts": self._max_attempts,
            },
        )
