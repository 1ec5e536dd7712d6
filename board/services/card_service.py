"""Card CRUD operations."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping
from uuid import uuid4

from fastapi import HTTPException

from board.repositories import CardRepository
from board.schemas import CardCreate, CardOut

logger = logging.getLogger(__name__)


class CardService:
    """Handle card CRUD operations and keep lists consistent when cards go away."""

    def __init__(self, repo: CardRepository, id_factory: Callable[[], str] = lambda: str(uuid4())):
        """Store the repository and the generator used for new card ids."""
        self._repo = repo
        self._id_factory = id_factory

    def list(self) -> List[CardOut]:
        """Return all cards in insertion order."""
        return [self._row_to_cardout(row) for row in self._repo.list_all()]

    def get(self, card_id: str) -> CardOut:
        """Fetch a card by id; raise 404 when missing."""
        return self._row_to_cardout(self.fetch_row(card_id))

    def exists(self, card_id: str) -> bool:
        return self._repo.exists(card_id.strip())

    def create(self, payload: CardCreate) -> CardOut:
        """Validate and store a new card."""
        title = payload.title.strip()
        if not title:
            logger.warning("Card rejected: empty title")
            raise HTTPException(status_code=400, detail="Invalid data. Title required.")
        content = payload.content.strip()
        if not content:
            logger.warning("Card rejected: empty content")
            raise HTTPException(status_code=400, detail="Invalid data. Content required.")

        card_id = self._id_factory()
        row = self._repo.insert(card_id=card_id, title=title, content=content)
        logger.info("Card with id %s created", card_id)
        return self._row_to_cardout(row)

    def delete(self, card_id: str) -> None:
        """Delete a card and drop its id from every list; raise 404 when not found."""
        card_id = card_id.strip()
        deleted = self._repo.delete_by_id(card_id)
        if deleted == 0:
            logger.error("Card with id %s not found.", card_id)
            raise HTTPException(status_code=404, detail="Card not found")
        logger.info("Card with id %s deleted.", card_id)

    def fetch_row(self, card_id: str) -> Dict[str, Any]:
        """Return the raw stored record for a card."""
        card_id = card_id.strip()
        row = self._repo.find_by_id(card_id) if card_id else None
        if not row:
            logger.error("Card with id %s not found.", card_id)
            raise HTTPException(status_code=404, detail="Card not found")
        return row

    @staticmethod
    def _row_to_cardout(row: Mapping[str, Any]) -> CardOut:
        return CardOut(id=row["id"], title=row["title"], content=row["content"])
