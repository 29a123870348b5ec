"""CategoryMenu domain entity: category name -> ordered item labels for one resolved day."""
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from lunch.utilities.constants import CATEGORY_ORDER


class CategoryMenu:
    def __init__(self, categories: Optional[Dict[str, Iterable[str]]] = None):
        categories = categories or {}
        unknown = set(categories) - set(CATEGORY_ORDER)
        if unknown:
            raise ValueError(f"Unknown menu categories: {', '.join(sorted(unknown))}")
        # Pinned to the disclosure order, whatever order the caller used
        self._categories: Dict[str, Tuple[str, ...]] = {
            name: tuple(categories[name]) for name in CATEGORY_ORDER if name in categories
        }

    def has(self, category: str) -> bool:
        return category in self._categories

    def items(self, category: str) -> Tuple[str, ...]:
        '''Items for a category, or an empty tuple when the day has none.'''
        return self._categories.get(category, ())

    def categories(self) -> List[str]:
        return list(self._categories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategoryMenu):
            return NotImplemented
        return self._categories == other._categories

    def __str__(self) -> str:
        return "; ".join(f"{name}: {', '.join(labels)}" for name, labels in self._categories.items())

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a CategoryMenu from its session form. Ignores unknown categories.'''
        d = dict(data) if isinstance(data, dict) else {}
        return CategoryMenu({
            name: [str(label) for label in d[name]]
            for name in CATEGORY_ORDER if isinstance(d.get(name), list)
        })

    def to_dict(self):
        return {name: list(labels) for name, labels in self._categories.items()}
