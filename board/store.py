"""In-memory storage for cards and lists."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List

SEED_CARDS: List[Dict[str, Any]] = [
    {"id": "1", "title": "Task One", "content": "This is card one"},
    {"id": "2", "title": "Task Two", "content": "This is card two"},
    {"id": "3", "title": "Task Three", "content": "This is card three"},
]

SEED_LISTS: List[Dict[str, Any]] = [
    {"id": "1", "header": "List One", "cardIds": ["1"]},
    {"id": "2", "header": "List Two", "cardIds": ["2", "3"]},
]


class Store:
    """Hold card and list records for the lifetime of the process.

    Records are plain dicts kept in insertion order. Nothing is persisted and
    there is no locking: the store is meant to be owned by a single worker
    process handling one request at a time.
    """

    def __init__(self, *, seed: bool = True):
        self.cards: List[Dict[str, Any]] = []
        self.lists: List[Dict[str, Any]] = []
        if seed:
            self.seed()

    def seed(self) -> None:
        """Append the sample cards and lists."""
        self.cards.extend(deepcopy(SEED_CARDS))
        self.lists.extend(deepcopy(SEED_LISTS))

    def clear(self) -> None:
        self.cards.clear()
        self.lists.clear()

    def reset(self) -> None:
        """Drop everything and load the sample data again."""
        self.clear()
        self.seed()


store = Store()
