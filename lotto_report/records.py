"""Plain value types shared by repositories, services and schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

MIN_NUMBER = 1
MAX_NUMBER = 45
PICK_COUNT = 6

# Smallest and largest sums six distinct numbers from 1..45 can reach.
MIN_ACHIEVABLE_SUM = sum(range(MIN_NUMBER, MIN_NUMBER + PICK_COUNT))
MAX_ACHIEVABLE_SUM = sum(range(MAX_NUMBER - PICK_COUNT + 1, MAX_NUMBER + 1))


@dataclass(frozen=True)
class DrawRecord:
    """One historical draw. `numbers` keeps the drawn order."""

    round: int
    draw_date: str
    first_prize_total: int
    first_prize_winner_count: int
    numbers: tuple[int, ...]
    bonus_number: int

    @property
    def sorted_numbers(self) -> tuple[int, ...]:
        return tuple(sorted(self.numbers))


@dataclass(frozen=True)
class SumRange:
    """Inclusive bounds for the sum of a combination."""

    min_sum: int
    max_sum: int

    def contains(self, total: int) -> bool:
        return self.min_sum <= total <= self.max_sum

    def is_feasible(self) -> bool:
        if self.min_sum > self.max_sum:
            return False
        return self.max_sum >= MIN_ACHIEVABLE_SUM and self.min_sum <= MAX_ACHIEVABLE_SUM


@dataclass(frozen=True)
class GeneratedCombination:
    id: str
    numbers: tuple[int, ...]
    sum: int
    reason: str
    match_round: int | None = None

    @classmethod
    def create(
        cls,
        id: str,
        numbers: Iterable[int],
        reason: str = "",
        match_round: int | None = None,
    ) -> "GeneratedCombination":
        ordered = tuple(sorted(int(n) for n in numbers))
        return cls(id=id, numbers=ordered, sum=sum(ordered), reason=reason, match_round=match_round)
