"""Business logic for lotto number frequency analysis (hot/cold numbers)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lotto_report.records import MAX_NUMBER, MIN_NUMBER, DrawRecord


@dataclass(frozen=True)
class NumberCount:
    number: int
    count: int


@dataclass(frozen=True)
class FrequencyProfile:
    total_draws: int
    draws_used: int
    recent_n: int | None
    counts: dict[int, int]
    min_count: int
    max_count: int
    hot: list[NumberCount]
    cold: list[NumberCount]

    @property
    def hot_numbers(self) -> list[int]:
        return [c.number for c in self.hot]

    @property
    def cold_numbers(self) -> list[int]:
        return [c.number for c in self.cold]


class FrequencyAnalysisService:
    """Count main-number occurrences across all or the most recent draws.

    Ties in hot/cold ordering are broken by the smaller number first.
    """

    def analyze(
        self,
        history: Sequence[DrawRecord],
        *,
        recent_n: int | None = None,
        top_n: int = 6,
    ) -> FrequencyProfile:
        if recent_n is not None and recent_n <= 0:
            raise ValueError("recent_n must be positive")
        if top_n <= 0:
            raise ValueError("top_n must be positive")

        # History is kept newest first, so the head is the recent window.
        draws = list(history[: int(recent_n)]) if recent_n is not None else list(history)

        counts: dict[int, int] = {n: 0 for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
        for draw in draws:
            for n in draw.numbers:
                if n in counts:
                    counts[n] += 1

        values = list(counts.values())

        by_hot = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        by_cold = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]))

        return FrequencyProfile(
            total_draws=len(history),
            draws_used=len(draws),
            recent_n=int(recent_n) if recent_n is not None else None,
            counts=counts,
            min_count=min(values),
            max_count=max(values),
            hot=[NumberCount(n, c) for n, c in by_hot[:top_n]],
            cold=[NumberCount(n, c) for n, c in by_cold[:top_n]],
        )
