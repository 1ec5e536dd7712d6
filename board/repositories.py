"""Repository layer encapsulating raw access to the in-memory store."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .store import Store


class CardRepository:
    """Storage access for card records."""

    def __init__(self, store: Store):
        self._store = store

    def list_all(self) -> List[Dict[str, Any]]:
        return list(self._store.cards)

    def find_by_id(self, card_id: str) -> Optional[Dict[str, Any]]:
        return next((card for card in self._store.cards if card["id"] == card_id), None)

    def exists(self, card_id: str) -> bool:
        return self.find_by_id(card_id) is not None

    def count(self) -> int:
        return len(self._store.cards)

    def insert(self, *, card_id: str, title: str, content: str) -> Dict[str, Any]:
        card = {"id": card_id, "title": title, "content": content}
        self._store.cards.append(card)
        return card

    def delete_by_id(self, card_id: str) -> int:
        """Remove the card and its id from every list; return the number of cards removed."""
        index = next(
            (i for i, card in enumerate(self._store.cards) if card["id"] == card_id), None
        )
        if index is None:
            return 0
        for board_list in self._store.lists:
            board_list["cardIds"] = [cid for cid in board_list["cardIds"] if cid != card_id]
        del self._store.cards[index]
        return 1


class ListRepository:
    """Storage access for list records."""

    def __init__(self, store: Store):
        self._store = store

    def list_all(self) -> List[Dict[str, Any]]:
        return list(self._store.lists)

    def find_by_id(self, list_id: str) -> Optional[Dict[str, Any]]:
        return next((item for item in self._store.lists if item["id"] == list_id), None)

    def count(self) -> int:
        return len(self._store.lists)

    def insert(self, *, list_id: str, header: str, card_ids: List[str]) -> Dict[str, Any]:
        board_list = {"id": list_id, "header": header, "cardIds": list(card_ids)}
        self._store.lists.append(board_list)
        return board_list

    def delete_by_id(self, list_id: str) -> int:
        before = len(self._store.lists)
        self._store.lists[:] = [item for item in self._store.lists if item["id"] != list_id]
        return before - len(self._store.lists)
