from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from lunch.api.dependencies import get_feed_fetcher, get_today
from lunch.domain.LookupFailure import FailureKind, LookupFailure
from lunch.logic.calendar.cycle_resolver import parse_requested_date, spoken_date
from lunch.infra.Feed_Client import FeedFetcher, fetch_or_empty
from lunch.logic.menu.feed_parser import missing_entrees
from lunch.logic.menu.menu_lookup import lookup_menu
from lunch.logic.speech.composer import failure_message

router = APIRouter()

STATUS_BY_KIND = {
    FailureKind.DATE_UNPARSABLE: 400,
    FailureKind.DATE_OUT_OF_CYCLE_RANGE: 404,
    FailureKind.NON_SERVICE_DAY: 404,
    FailureKind.NO_ENTREES_FOUND: 404,
    FailureKind.FEED_UNAVAILABLE: 503,
    FailureKind.FEED_MALFORMED: 503,
}


def _raise_for(failure: LookupFailure):
    raise HTTPException(status_code=STATUS_BY_KIND[failure.kind], detail=failure_message(failure))


@router.get("/api/menu")
async def get_menu(date_value: Optional[str] = Query(default=None, alias="date"),
                   fetch_feed: FeedFetcher = Depends(get_feed_fetcher),
                   today: date = Depends(get_today)):
    """Whole menu for one day as JSON, categories in disclosure order."""
    target = parse_requested_date(date_value, today)
    if isinstance(target, LookupFailure):
        _raise_for(target)

    menu = lookup_menu(await fetch_or_empty(fetch_feed), target)
    if isinstance(menu, LookupFailure):
        _raise_for(menu)
    no_entrees = missing_entrees(menu, spoken_date(target))
    if no_entrees is not None:
        _raise_for(no_entrees)

    return {
        "date": target.isoformat(),
        "label": spoken_date(target),
        "categories": [{"name": name, "items": list(menu.items(name))} for name in menu],
    }
