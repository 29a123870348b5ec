"""Menu feed decoding and per-day category extraction.

Feed shape (provider JSON):
    menuList[1].menuFirstDate            -> cycle anchor, epoch seconds
    menu.menu.items[week][weekday][period][station] -> [{"a": "<label>"}, ...]

Only the lunch meal period and the stations listed in STATION_CATEGORIES are
read; everything else in the document is ignored. The feed is never mutated.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from lunch.domain.CategoryMenu import CategoryMenu
from lunch.domain.CycleIndex import CycleIndex
from lunch.domain.LookupFailure import FailureKind, LookupFailure
from lunch.domain.MenuFeed import MenuFeed
from lunch.utilities.constants import (
    ANCHOR_MENU_LIST_INDEX,
    ENTREES,
    LUNCH_MEAL_PERIOD,
    STATION_CATEGORIES,
)

logger = logging.getLogger(__name__)


def sanitize_label(label: str) -> str:
    """Speech synthesis reads '&' badly; say 'and' instead."""
    return str(label).replace("&", "and").strip()


def _entry_label(entry: Any) -> Optional[str]:
    if isinstance(entry, dict):
        entry = entry.get("a")
    if entry is None:
        return None
    label = sanitize_label(entry)
    return label or None


def decode_feed(raw: bytes) -> Union[MenuFeed, LookupFailure]:
    """Turn fetched bytes into a MenuFeed.

    Empty bytes mean the fetch failed (FEED_UNAVAILABLE); anything that is not
    the documented document shape is FEED_MALFORMED.
    """
    if not raw:
        return LookupFailure(FailureKind.FEED_UNAVAILABLE)
    try:
        obj = json.loads(raw)
    except ValueError as e:
        logger.error(f"Menu feed is not valid JSON: {e}")
        return LookupFailure(FailureKind.FEED_MALFORMED, detail="invalid json")

    try:
        first_date = obj["menuList"][ANCHOR_MENU_LIST_INDEX]["menuFirstDate"]
        anchor = datetime.fromtimestamp(int(first_date), tz=timezone.utc).date()
        items = obj["menu"]["menu"]["items"]
    except (KeyError, IndexError, TypeError, ValueError, OverflowError, OSError) as e:
        logger.error(f"Menu feed is missing its anchor date or items: {e!r}")
        return LookupFailure(FailureKind.FEED_MALFORMED, detail="missing anchor or items")

    if not isinstance(items, list):
        logger.error("Menu feed items is not a list")
        return LookupFailure(FailureKind.FEED_MALFORMED, detail="items is not a list")
    return MenuFeed(anchor, items)


def parse_menu(feed: MenuFeed, index: CycleIndex,
               stations: Mapping[int, str] = STATION_CATEGORIES) -> Union[CategoryMenu, LookupFailure]:
    """Build the category mapping for one resolved cycle day.

    Stations missing for the day are left out of the result. A feed too short
    for the index is FEED_MALFORMED, which callers treat as "try again later".
    """
    if index.week < 0 or index.weekday < 0:
        return LookupFailure(FailureKind.FEED_MALFORMED, detail=f"negative index {index}")
    try:
        slots = feed.items[index.week][index.weekday][LUNCH_MEAL_PERIOD]
    except (IndexError, KeyError, TypeError):
        logger.error(f"Menu feed has no lunch stations at {index}")
        return LookupFailure(FailureKind.FEED_MALFORMED, detail=f"no stations at {index}")
    if not isinstance(slots, list):
        logger.error(f"Menu feed stations at {index} are not a list")
        return LookupFailure(FailureKind.FEED_MALFORMED, detail=f"stations at {index} not a list")

    categories: Dict[str, list] = {}
    for slot, category in stations.items():
        if slot >= len(slots) or not isinstance(slots[slot], list):
            continue
        labels = [label for label in (_entry_label(e) for e in slots[slot]) if label]
        if labels:
            categories[category] = labels
    return CategoryMenu(categories)


def missing_entrees(menu: CategoryMenu, date_label: str) -> Optional[LookupFailure]:
    """NO_ENTREES_FOUND when the day has no entrees at all, else None."""
    if menu.has(ENTREES):
        return None
    return LookupFailure(FailureKind.NO_ENTREES_FOUND, date_label)
