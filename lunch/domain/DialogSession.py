"""DialogSession domain entity: per-conversation disclosure stage plus the menu being walked."""
from enum import IntEnum
from typing import Optional

from lunch.domain.CategoryMenu import CategoryMenu


class Stage(IntEnum):
    """Which category was revealed most recently. DESSERT is terminal."""
    NOT_STARTED = 0
    ENTREES = 1
    SOUPS = 2
    SALADS = 3
    DELI = 4
    DESSERT = 5


class DialogSession:
    def __init__(self, stage: Stage = Stage.NOT_STARTED, target_month: str = "",
                 target_date_label: str = "", category_menu: Optional[CategoryMenu] = None):
        self.stage = Stage(stage)
        self.target_month = target_month
        self.target_date_label = target_date_label
        self.category_menu = category_menu if category_menu is not None else CategoryMenu()

    @property
    def is_active(self) -> bool:
        '''True while there is at least one more category to reveal.'''
        return Stage.NOT_STARTED < self.stage < Stage.DESSERT

    @property
    def is_done(self) -> bool:
        return self.stage == Stage.DESSERT

    def advance(self) -> Stage:
        '''Moves one category forward. Finished dialogs cannot advance.'''
        if self.is_done:
            raise ValueError("Dialog already revealed every category")
        self.stage = Stage(self.stage + 1)
        return self.stage

    def __str__(self) -> str:
        return f"DialogSession stage={self.stage.name} date={self.target_date_label!r}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Rebuilds a session from stored attributes. Returns None when nothing usable is stored.'''
        if not isinstance(data, dict):
            return None
        try:
            stage = Stage(int(data.get("stage", 0)))
        except (TypeError, ValueError):
            return None
        return DialogSession(
            stage=stage,
            target_month=str(data.get("targetMonth", "")),
            target_date_label=str(data.get("targetDateLabel", "")),
            category_menu=CategoryMenu.from_dict(data.get("categoryMenu")),
        )

    def to_dict(self):
        return {
            "stage": int(self.stage),
            "targetMonth": self.target_month,
            "targetDateLabel": self.target_date_label,
            "categoryMenu": self.category_menu.to_dict(),
        }
