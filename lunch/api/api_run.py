from datetime import date
import logging

from fastapi import FastAPI, Depends

from lunch.api.dependencies import get_feed_fetcher, get_today
from lunch.api.routes import menu
from lunch.infra.Session_Store import SessionStore
from lunch.infra.Feed_Client import FeedFetcher
from lunch.logic.dialog.speechlet import LunchSpeechlet
from lunch.utilities.validators import SkillRequestEnvelope, SkillResponseEnvelope

# Logging
logger = logging.getLogger("lunch_app")

# Initialize FastAPI app
app = FastAPI(title="School Lunch Menu Skill")

# Include routers
app.include_router(menu.router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/alexa")
async def skill_endpoint(envelope: SkillRequestEnvelope,
                         fetch_feed: FeedFetcher = Depends(get_feed_fetcher),
                         today: date = Depends(get_today)):
    """Voice platform webhook: one conversation turn in, one reply out."""
    request = envelope.request
    session = envelope.session
    store = SessionStore(session.attributes)
    if session.new:
        logger.info(f"onSessionStarted requestId={request.requestId}, sessionId={session.sessionId}")
    logger.info(f"{request.type} requestId={request.requestId}, sessionId={session.sessionId}")

    speechlet = LunchSpeechlet(fetch_feed, today=lambda: today)
    if request.type == "LaunchRequest":
        reply = speechlet.on_launch()
    elif request.type == "IntentRequest":
        reply = await speechlet.on_intent(request.intent.name, request.intent.slot_values(), store)
    else:
        logger.info(f"Session ended ({request.reason}) sessionId={session.sessionId}")
        speechlet.on_session_ended(store)
        reply = None

    return SkillResponseEnvelope.from_reply(reply, store).model_dump(exclude_none=True)
