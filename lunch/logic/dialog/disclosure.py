"""Stage-by-stage disclosure of a day's menu across conversation turns.

A fresh date lookup reveals Entrees (stage 1). Each "more" request reveals the
next category in CATEGORY_ORDER. Revealing Fruit and Dessert (stage 5) ends the
dialog; after that, or with no stored dialog at all, reveal_next() returns
None and the caller starts over with a welcome.
"""
from datetime import date
from typing import NamedTuple, Optional, Tuple

from lunch.domain.CategoryMenu import CategoryMenu
from lunch.domain.DialogSession import DialogSession, Stage
from lunch.logic.calendar.cycle_resolver import month_name, spoken_date
from lunch.utilities.constants import CATEGORY_ORDER


class Reveal(NamedTuple):
    category: str
    items: Tuple[str, ...]
    finished: bool


def category_for(stage: Stage) -> str:
    if stage == Stage.NOT_STARTED:
        raise ValueError("No category before the dialog starts")
    return CATEGORY_ORDER[stage - 1]


def _reveal(dialog: DialogSession) -> Reveal:
    stage = dialog.advance()
    category = category_for(stage)
    return Reveal(category, dialog.category_menu.items(category), dialog.is_done)


def start_disclosure(menu: CategoryMenu, target: date) -> Tuple[DialogSession, Reveal]:
    """New dialog for a freshly looked up date, already advanced to Entrees.

    Entrees are revealed even when the day has none; the empty reveal is
    reported and "more" carries on from there.
    """
    dialog = DialogSession(
        stage=Stage.NOT_STARTED,
        target_month=month_name(target),
        target_date_label=spoken_date(target, with_year=False),
        category_menu=menu,
    )
    return dialog, _reveal(dialog)


def reveal_next(dialog: Optional[DialogSession]) -> Optional[Reveal]:
    """Advance an active dialog by one category. None means there is nothing to continue."""
    if dialog is None or not dialog.is_active:
        return None
    return _reveal(dialog)
