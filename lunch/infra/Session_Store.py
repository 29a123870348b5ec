import logging
from typing import Any, Dict, Optional

from lunch.domain.DialogSession import DialogSession
from lunch.utilities.constants import DIALOG_SESSION_KEY

logger = logging.getLogger(__name__)


class SessionStore:
    """Key/value view over the voice platform's session attributes.

    The platform sends the attributes with every request and stores whatever
    comes back in sessionAttributes, so nothing is kept server side.
    """

    def __init__(self, attributes: Optional[Dict[str, Any]] = None):
        self._attributes: Dict[str, Any] = dict(attributes or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def discard(self, key: str) -> None:
        self._attributes.pop(key, None)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._attributes)


def load_dialog(store: SessionStore) -> Optional[DialogSession]:
    raw = store.get(DIALOG_SESSION_KEY)
    if raw is None:
        return None
    dialog = DialogSession.from_dict(raw)
    if dialog is None:
        logger.warning(f"Ignoring unreadable dialog state: {raw!r}")
    return dialog


def save_dialog(store: SessionStore, dialog: DialogSession) -> None:
    store.set(DIALOG_SESSION_KEY, dialog.to_dict())


def clear_dialog(store: SessionStore) -> None:
    store.discard(DIALOG_SESSION_KEY)
