"""MenuFeed domain entity: the provider's cycle anchor date plus its nested per-day station lists."""
from datetime import date
from typing import Any, List


class MenuFeed:
    def __init__(self, anchor_date: date, items: List[Any]):
        self.anchor_date = anchor_date
        self.items = items  # [cycle week][weekday][meal period][station slot] -> entries

    @property
    def cycle_length(self) -> int:
        '''Number of week buckets the feed knows about.

        Every bucket in items is a cycle week; nothing is stripped from the end.
        A provider that appends a non-cycle bucket (daily offerings) would have
        it read as the last week of the cycle.
        '''
        return len(self.items)

    def __str__(self) -> str:
        return f"MenuFeed anchored {self.anchor_date.isoformat()} - {self.cycle_length} weeks"

    __repr__ = __str__
