"""Random picking without recent repeats (quotes, task-title suggestions)."""

import random
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Hashable, Sequence, TypeVar

from .suggestions import QUOTES, TASK_EXAMPLES, Quote

T = TypeVar("T")

QUOTE_WINDOW = 30
SUGGESTION_WINDOW = 3


class ResetPolicy(Enum):
    """What to do when every item in the pool is in the recent window."""

    FULL = "full"  # forget everything
    KEEP_LAST = "keep_last"  # forget all but the latest, so it can't repeat immediately


@dataclass
class RecentWindow:
    """Recently picked ids, oldest first, capped at size."""

    size: int
    ids: list = field(default_factory=list)

    def __contains__(self, item_id) -> bool:
        return item_id in self.ids

    def push(self, item_id) -> None:
        self.ids.append(item_id)
        while len(self.ids) > self.size:
            self.ids.pop(0)

    def reset(self, policy: ResetPolicy) -> None:
        if policy is ResetPolicy.KEEP_LAST and self.ids:
            self.ids = self.ids[-1:]
        else:
            self.ids = []


def pick(
    pool: Sequence[T],
    window: RecentWindow,
    key: Callable[[T], Hashable] = lambda item: item,
    rng: random.Random | None = None,
    reset: ResetPolicy = ResetPolicy.FULL,
) -> T:
    """
    Pick an item whose key is not in the recent window, then record it.

    Raises ValueError for an empty pool.
    """
    if not pool:
        raise ValueError("Cannot pick from an empty pool")
    rng = rng or random.Random()

    candidates = [item for item in pool if key(item) not in window]
    if not candidates:
        window.reset(reset)
        candidates = [item for item in pool if key(item) not in window] or list(pool)

    chosen = rng.choice(candidates)
    window.push(key(chosen))
    return chosen


class SuggestionPicker:
    """Placeholder task titles that don't repeat within the last few picks."""

    def __init__(
        self,
        examples: Sequence[str] = TASK_EXAMPLES,
        window_size: int = SUGGESTION_WINDOW,
        rng: random.Random | None = None,
    ):
        self.examples = list(examples)
        self.window = RecentWindow(window_size)
        self.rng = rng or random.Random()

    def next(self) -> str:
        return pick(self.examples, self.window, rng=self.rng, reset=ResetPolicy.FULL)


@dataclass
class QuoteRotation:
    """
    Quote of the day.

    The same quote is returned for every call on a calendar day; a new day
    picks one not shown in the last `window_size` days.
    """

    window_size: int = QUOTE_WINDOW
    current_id: int | None = None
    last_date: date | None = None
    recent_ids: list[int] = field(default_factory=list)

    def quote_for(
        self,
        today: date,
        quotes: Sequence[Quote] = QUOTES,
        rng: random.Random | None = None,
    ) -> Quote:
        by_id = {q.id: q for q in quotes}
        if self.last_date == today and self.current_id in by_id:
            return by_id[self.current_id]

        window = RecentWindow(self.window_size, list(self.recent_ids))
        quote = pick(quotes, window, key=lambda q: q.id, rng=rng, reset=ResetPolicy.KEEP_LAST)

        self.current_id = quote.id
        self.last_date = today
        self.recent_ids = window.ids
        return quote

    def to_dict(self) -> dict:
        return {
            "current_id": self.current_id,
            "last_date": self.last_date.isoformat() if self.last_date else None,
            "recent_ids": list(self.recent_ids),
        }

    @classmethod
    def from_dict(cls, data: dict, window_size: int = QUOTE_WINDOW) -> "QuoteRotation":
        last = data.get("last_date")
        return cls(
            window_size=window_size,
            current_id=data.get("current_id"),
            last_date=date.fromisoformat(last) if last else None,
            recent_ids=[int(i) for i in data.get("recent_ids", [])],
        )
