"""SkillReply domain entity: what one turn hands back to the voice platform."""
from typing import Optional


class SkillReply:
    def __init__(self, speech: str, is_ssml: bool = False, card_title: Optional[str] = None,
                 card_text: Optional[str] = None, reprompt: Optional[str] = None,
                 should_end_session: bool = True):
        self.speech = speech
        self.is_ssml = is_ssml
        self.card_title = card_title
        self.card_text = card_text
        self.reprompt = reprompt
        self.should_end_session = should_end_session

    @property
    def has_card(self) -> bool:
        return self.card_title is not None and self.card_text is not None

    def __str__(self) -> str:
        state = "tell" if self.should_end_session else "ask"
        return f"SkillReply({state}): {self.speech}"

    __repr__ = __str__
