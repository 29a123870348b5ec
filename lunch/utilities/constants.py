from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Category names, in the order they are disclosed to the user
ENTREES: Final[str] = "Entrees"
SOUPS: Final[str] = "Soups"
SALADS: Final[str] = "Salads"
DELI: Final[str] = "Deli"
DESSERT: Final[str] = "Fruit and Dessert"
CATEGORY_ORDER: Final[tuple[str, ...]] = (ENTREES, SOUPS, SALADS, DELI, DESSERT)

# Feed station slot -> category. Slots not listed here (1 = Improvisations, ...) are ignored.
STATION_CATEGORIES: Final[dict[int, str]] = {
    3: ENTREES,   # Main Ingredient
    0: SOUPS,     # Stock Exchange
    4: SALADS,
    2: DELI,      # Classic Cuts
    8: DESSERT,   # Baking Co
}

# items[week][weekday][meal period][station]; period 1 is lunch
LUNCH_MEAL_PERIOD: Final[int] = 1
ANCHOR_MENU_LIST_INDEX: Final[int] = 1

# 0 = Sunday, matching the feed's weekday buckets
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"
)
SERVING_WEEKDAYS: Final[range] = range(1, 6)
MONTH_NAMES: Final[tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
)

# Session attribute key for the serialized dialog record
DIALOG_SESSION_KEY: Final[str] = "dialogSession"

MORE_PROMPT: Final[str] = "Want more menu items?"
WHICH_DAY_PROMPT: Final[str] = "Which day do you want?"
GOODBYE: Final[str] = "Goodbye"
