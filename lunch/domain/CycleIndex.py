"""CycleIndex domain entity: a (week, weekday) position inside the menu feed's repeating cycle."""
from lunch.utilities.constants import SERVING_WEEKDAYS


class CycleIndex:
    def __init__(self, week: int, weekday: int):
        self.week = week
        self.weekday = weekday  # 0 = Sunday

    def is_serving_day(self) -> bool:
        return self.weekday in SERVING_WEEKDAYS

    def in_cycle(self, cycle_length: int) -> bool:
        return 0 <= self.week < cycle_length

    def day_number(self) -> int:
        '''Linear cycle-day index: week * 7 + weekday.'''
        return self.week * 7 + self.weekday

    def __eq__(self, other) -> bool:
        if not isinstance(other, CycleIndex):
            return NotImplemented
        return (self.week, self.weekday) == (other.week, other.weekday)

    def __hash__(self) -> int:
        return hash((self.week, self.weekday))

    def __str__(self) -> str:
        return f"CycleIndex(week={self.week}, weekday={self.weekday})"

    __repr__ = __str__
