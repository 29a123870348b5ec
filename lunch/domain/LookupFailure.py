"""LookupFailure: the error variant returned by each menu lookup stage instead of raising."""
from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Mutually exclusive reasons a turn cannot produce a menu."""
    DATE_UNPARSABLE = "date_unparsable"
    DATE_OUT_OF_CYCLE_RANGE = "date_out_of_cycle_range"
    NON_SERVICE_DAY = "non_service_day"
    FEED_UNAVAILABLE = "feed_unavailable"
    FEED_MALFORMED = "feed_malformed"
    NO_ENTREES_FOUND = "no_entrees_found"

    @property
    def transient(self) -> bool:
        """True when the user should simply try again later."""
        return self in (FailureKind.FEED_UNAVAILABLE, FailureKind.FEED_MALFORMED)


class LookupFailure:
    def __init__(self, kind: FailureKind, date_label: str = "", detail: Optional[str] = None):
        self.kind = kind
        self.date_label = date_label  # spoken rendering, e.g. "Tuesday October 7 2025"
        self.detail = detail

    def __eq__(self, other) -> bool:
        if not isinstance(other, LookupFailure):
            return NotImplemented
        return self.kind == other.kind and self.date_label == other.date_label

    def __str__(self) -> str:
        parts = [self.kind.value]
        if self.date_label:
            parts.append(self.date_label)
        if self.detail:
            parts.append(self.detail)
        return " - ".join(parts)

    __repr__ = __str__
