"""Intent handling for the lunch menu voice skill.

Example dialog:

    User: "Alexa, open Stone Ridge Lunch"
    Alexa: "Stone Ridge Lunch. For which day do you want the menu?"
    User: "October seventh."
    Alexa: "Entrees for Tuesday October 7 ... Want more menu items?"
    User: "Yes."
    Alexa: "Soups for Tuesday October 7 ... Want more menu items?"
    ...
    Alexa: "Fruit and Dessert for Tuesday October 7 ..."   (session ends)
"""
import logging
from datetime import date
from typing import Callable, Dict, Optional

from lunch.domain.DialogSession import DialogSession
from lunch.domain.LookupFailure import LookupFailure
from lunch.domain.SkillReply import SkillReply
from lunch.infra.Feed_Client import FeedFetcher, fetch_or_empty
from lunch.infra.Session_Store import SessionStore, clear_dialog, load_dialog, save_dialog
from lunch.logic.calendar.cycle_resolver import parse_requested_date
from lunch.logic.dialog.disclosure import Reveal, reveal_next, start_disclosure
from lunch.logic.menu.menu_lookup import lookup_menu
from lunch.logic.speech.composer import render, render_failure, wrap_ssml
from lunch.utilities.config import PROVIDER_NAME, SCHOOL_NAME, SKILL_NAME
from lunch.utilities.constants import GOODBYE, MORE_PROMPT, WHICH_DAY_PROMPT

logger = logging.getLogger(__name__)

SLOT_DAY = "day"
MENU_INTENT = "GetMenuIntent"
MORE_INTENTS = frozenset({
    "GetNextCategoryIntent", "AMAZON.YesIntent", "AMAZON.NextIntent", "AMAZON.MoreIntent",
})
STOP_INTENTS = frozenset({"AMAZON.StopIntent", "AMAZON.CancelIntent", "AMAZON.NoIntent"})
HELP_INTENT = "AMAZON.HelpIntent"

HELP_TEXT = (
    f"With {SKILL_NAME}, you can get the menu {PROVIDER_NAME} is serving at {SCHOOL_NAME}."
    " For example, you could say today, tomorrow, or a specific date like October seventh."
    " Now, which day do you want?"
)
WELCOME_TEXT = f"{SKILL_NAME}. For which day do you want the menu?"


class LunchSpeechlet:
    def __init__(self, fetch_feed: FeedFetcher, today: Callable[[], date] = date.today):
        self.fetch_feed = fetch_feed
        self.today = today

    # -------------------- Lifecycle --------------------
    def on_launch(self) -> SkillReply:
        return SkillReply(WELCOME_TEXT, reprompt=HELP_TEXT, should_end_session=False)

    def on_session_ended(self, store: SessionStore) -> None:
        clear_dialog(store)

    async def on_intent(self, intent_name: str, slots: Dict[str, Optional[str]],
                        store: SessionStore) -> SkillReply:
        if intent_name == MENU_INTENT:
            return await self.handle_menu_request(slots.get(SLOT_DAY), store)
        if intent_name in MORE_INTENTS:
            return self.handle_more_request(store)
        if intent_name == HELP_INTENT:
            return self.help()
        if intent_name in STOP_INTENTS:
            clear_dialog(store)
            return SkillReply(GOODBYE, should_end_session=True)
        logger.warning(f"Unhandled intent {intent_name!r}; answering with help")
        return self.help()

    def help(self) -> SkillReply:
        return SkillReply(HELP_TEXT, reprompt=WHICH_DAY_PROMPT, should_end_session=False)

    # -------------------- Menu turns --------------------
    async def handle_menu_request(self, day_value: Optional[str], store: SessionStore) -> SkillReply:
        """Fresh date lookup: fetch, resolve, parse, then reveal Entrees."""
        target = parse_requested_date(day_value, self.today())
        if isinstance(target, LookupFailure):
            clear_dialog(store)
            return render_failure(target)

        logger.info(f"Looking up menu for {target.isoformat()}")
        menu = lookup_menu(await fetch_or_empty(self.fetch_feed), target)
        if isinstance(menu, LookupFailure):
            logger.info(f"Menu lookup failed: {menu}")
            clear_dialog(store)
            return render_failure(menu)

        dialog, reveal = start_disclosure(menu, target)
        save_dialog(store, dialog)
        return self._reply_for(dialog, reveal)

    def handle_more_request(self, store: SessionStore) -> SkillReply:
        """Reveal the next category; with nothing to continue, start over."""
        dialog = load_dialog(store)
        reveal = reveal_next(dialog)
        if reveal is None:
            logger.info("More requested without an active dialog; starting over")
            clear_dialog(store)
            return self.on_launch()
        save_dialog(store, dialog)
        return self._reply_for(dialog, reveal)

    @staticmethod
    def _reply_for(dialog: DialogSession, reveal: Reveal) -> SkillReply:
        rendered = render(reveal.category, reveal.items, dialog.target_date_label)
        return SkillReply(
            wrap_ssml(rendered.speech),
            is_ssml=True,
            card_title=f"{dialog.target_month} Menu - {dialog.target_date_label}",
            card_text=rendered.card_text,
            reprompt=None if reveal.finished else MORE_PROMPT,
            should_end_session=reveal.finished,
        )
