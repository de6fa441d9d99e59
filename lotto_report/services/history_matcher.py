"""Check whether a combination already won first prize in a past draw."""

from __future__ import annotations

from typing import Iterable

from lotto_report.records import DrawRecord


def normalize(numbers: Iterable[int]) -> tuple[int, ...]:
    return tuple(sorted(int(n) for n in numbers))


def find_match(candidate: Iterable[int], history: Iterable[DrawRecord]) -> int | None:
    """Return the round of the first draw whose main numbers equal `candidate` as a set.

    Order of `candidate` does not matter and the bonus number is ignored.
    Returns None when nothing matches, including for an empty history.
    """

    target = normalize(candidate)
    for draw in history:
        if normalize(draw.numbers) == target:
            return draw.round
    return None


class HistoryMatcher:
    """Index of sorted main numbers -> round for one history snapshot.

    Gives the same answer as `find_match` (first draw wins on a repeat).
    """

    def __init__(self, history: Iterable[DrawRecord]) -> None:
        self._index: dict[tuple[int, ...], int] = {}
        for draw in history:
            self._index.setdefault(normalize(draw.numbers), draw.round)

    def __len__(self) -> int:
        return len(self._index)

    def find_match(self, candidate: Iterable[int]) -> int | None:
        return self._index.get(normalize(candidate))
