"""Fetched bytes + target date -> CategoryMenu, stopping at the first failure."""
import logging
from datetime import date
from typing import Union

from lunch.domain.CategoryMenu import CategoryMenu
from lunch.domain.LookupFailure import LookupFailure
from lunch.logic.calendar.cycle_resolver import resolve_cycle_index, spoken_date
from lunch.logic.menu.feed_parser import decode_feed, parse_menu

logger = logging.getLogger(__name__)


def lookup_menu(raw: bytes, target: date) -> Union[CategoryMenu, LookupFailure]:
    feed = decode_feed(raw)
    if isinstance(feed, LookupFailure):
        return feed

    index = resolve_cycle_index(feed.anchor_date, target, feed.cycle_length)
    if isinstance(index, LookupFailure):
        return index

    menu = parse_menu(feed, index)
    if isinstance(menu, LookupFailure):
        # keep the date so the reply and the logs can name it
        menu.date_label = spoken_date(target)
        return menu
    logger.debug(f"Menu for {target.isoformat()} at {index}: {menu}")
    return menu
