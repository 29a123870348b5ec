"""
Voice platform request/response envelopes using Pydantic.
Unknown fields sent by the platform (context, locale, ...) are ignored.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, Dict, Optional

from lunch.domain.SkillReply import SkillReply
from lunch.infra.Session_Store import SessionStore


class SlotInput(BaseModel):
    """A single intent slot; value is absent when the user did not fill it."""
    name: str = ""
    value: Optional[str] = None


class IntentInput(BaseModel):
    name: str = Field(..., min_length=1)
    slots: Dict[str, SlotInput] = Field(default_factory=dict)

    @field_validator('slots', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else {}

    def slot_values(self) -> Dict[str, Optional[str]]:
        return {key: slot.value for key, slot in self.slots.items()}


class SessionInput(BaseModel):
    sessionId: str = ""
    new: bool = False
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('attributes', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else {}


class RequestInput(BaseModel):
    type: str = Field(..., pattern=r'^(LaunchRequest|IntentRequest|SessionEndedRequest)$')
    requestId: str = ""
    intent: Optional[IntentInput] = None
    reason: Optional[str] = None

    @model_validator(mode='after')
    def intent_required(self):
        """IntentRequest must name its intent."""
        if self.type == 'IntentRequest' and self.intent is None:
            raise ValueError('IntentRequest without an intent')
        return self


class SkillRequestEnvelope(BaseModel):
    version: str = "1.0"
    session: SessionInput = Field(default_factory=SessionInput)
    request: RequestInput


class OutputSpeech(BaseModel):
    type: str = Field(..., pattern=r'^(PlainText|SSML)$')
    text: Optional[str] = None
    ssml: Optional[str] = None

    @staticmethod
    def plain(text: str) -> "OutputSpeech":
        return OutputSpeech(type="PlainText", text=text)


class Card(BaseModel):
    type: str = "Simple"
    title: str
    content: str


class Reprompt(BaseModel):
    outputSpeech: OutputSpeech


class ResponseBody(BaseModel):
    outputSpeech: Optional[OutputSpeech] = None
    card: Optional[Card] = None
    reprompt: Optional[Reprompt] = None
    shouldEndSession: bool = True


class SkillResponseEnvelope(BaseModel):
    version: str = "1.0"
    sessionAttributes: Dict[str, Any] = Field(default_factory=dict)
    response: ResponseBody = Field(default_factory=ResponseBody)

    @classmethod
    def from_reply(cls, reply: Optional[SkillReply], store: SessionStore) -> "SkillResponseEnvelope":
        """Build the platform response. No reply (session ended) gives an empty body."""
        if reply is None:
            return cls(sessionAttributes=store.to_dict())
        if reply.is_ssml:
            speech = OutputSpeech(type="SSML", ssml=reply.speech)
        else:
            speech = OutputSpeech.plain(reply.speech)
        body = ResponseBody(
            outputSpeech=speech,
            card=Card(title=reply.card_title, content=reply.card_text) if reply.has_card else None,
            reprompt=Reprompt(outputSpeech=OutputSpeech.plain(reply.reprompt)) if reply.reprompt else None,
            shouldEndSession=reply.should_end_session,
        )
        return cls(sessionAttributes=store.to_dict(), response=body)
