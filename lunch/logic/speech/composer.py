"""Spoken and card rendering shared by the first reply and every "more" turn."""
import logging
from typing import NamedTuple, Sequence
from xml.sax.saxutils import escape

from lunch.domain.LookupFailure import FailureKind, LookupFailure
from lunch.domain.SkillReply import SkillReply
from lunch.utilities.config import PROVIDER_NAME
from lunch.utilities.constants import CATEGORY_ORDER, ENTREES, MORE_PROMPT, WHICH_DAY_PROMPT

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    FailureKind.DATE_UNPARSABLE: (
        "Sorry, I didn't understand that date. Please say it again, for example today,"
        " tomorrow, or October seventh."
    ),
    FailureKind.DATE_OUT_OF_CYCLE_RANGE: "There is no menu information for {date}.",
    FailureKind.NON_SERVICE_DAY: "Food is not served on {date}.",
    FailureKind.FEED_UNAVAILABLE: (
        "There is a problem connecting to {provider} at this time. Please try again later."
    ),
    FailureKind.FEED_MALFORMED: (
        "There is a problem connecting to {provider} at this time. Please try again later."
    ),
    FailureKind.NO_ENTREES_FOUND: "I could not find any entrees for {date}.",
}


class RenderedCategory(NamedTuple):
    speech: str
    card_text: str
    wants_more: bool


def failure_message(failure: LookupFailure) -> str:
    return FAILURE_MESSAGES[failure.kind].format(date=failure.date_label, provider=PROVIDER_NAME)


def wrap_ssml(body: str) -> str:
    return f"<speak>{body}</speak>"


def _paragraph(text: str) -> str:
    return f"<p>{escape(text)}</p>"


def _empty_line(category: str, date_label: str) -> str:
    if category == ENTREES:
        logger.info(f"No entrees found for {date_label}")
        return failure_message(LookupFailure(FailureKind.NO_ENTREES_FOUND, date_label))
    return f"No {category.lower()} are listed for {date_label}."


def render(category: str, items: Sequence[str], date_label: str) -> RenderedCategory:
    """Render one category. Every category but the last ends with the "more" prompt."""
    wants_more = category != CATEGORY_ORDER[-1]
    lines = [f"{category} for {date_label}"]
    lines.extend(items if items else [_empty_line(category, date_label)])
    if wants_more:
        lines.append(MORE_PROMPT)
    speech = " ".join(_paragraph(line) for line in lines)
    return RenderedCategory(speech, "\n".join(lines), wants_more)


def render_failure(failure: LookupFailure) -> SkillReply:
    """Date problems keep the conversation open for another day; feed problems end it."""
    message = failure_message(failure)
    if failure.kind in (FailureKind.DATE_UNPARSABLE, FailureKind.DATE_OUT_OF_CYCLE_RANGE,
                        FailureKind.NON_SERVICE_DAY):
        if failure.kind != FailureKind.DATE_UNPARSABLE:
            message = f"{message} {WHICH_DAY_PROMPT}"
        return SkillReply(message, reprompt=WHICH_DAY_PROMPT, should_end_session=False)
    return SkillReply(wrap_ssml(escape(message)), is_ssml=True, should_end_session=True)
