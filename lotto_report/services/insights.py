"""Static commentary cards shown next to the frequency analysis.

These are fixed texts, not computed from the history.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Insight:
    title: str
    tag: str
    bullets: list[str] = field(default_factory=list)


STATIC_INSIGHTS: tuple[Insight, ...] = (
    Insight(
        title="Sum range",
        tag="130 ~ 160",
        bullets=[
            "Over the last 10 weeks the sum of the numbers often fell between 130 and 160.",
            "Aiming for a similar range in the next round is a reasonable choice.",
        ],
    ),
    Insight(
        title="Odd/even ratio",
        tag="3:3 or 4:2",
        bullets=[
            "Recent odd:even ratios were most often 3:3 or 4:2.",
            "Extreme ratios are best avoided.",
        ],
    ),
    Insight(
        title="Consecutive numbers",
        tag="1-2 pairs",
        bullets=[
            "Consecutive numbers have been appearing less often.",
            "One consecutive pair is still worth considering.",
        ],
    ),
)


def list_insights() -> list[dict]:
    return [{"title": i.title, "tag": i.tag, "bullets": list(i.bullets)} for i in STATIC_INSIGHTS]
