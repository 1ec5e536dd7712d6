"""List CRUD operations."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping
from uuid import uuid4

from fastapi import HTTPException

from board.repositories import ListRepository
from board.schemas import ListCreate, ListOut
from board.services.card_service import CardService

logger = logging.getLogger(__name__)


class ListService:
    """Handle list CRUD operations; card references are checked on creation."""

    def __init__(
        self,
        repo: ListRepository,
        card_service: CardService,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        """Store the repository, the card service used to resolve ids, and the id generator."""
        self._repo = repo
        self._card_service = card_service
        self._id_factory = id_factory

    def list(self) -> List[ListOut]:
        """Return all lists in insertion order."""
        return [self._row_to_listout(row) for row in self._repo.list_all()]

    def get(self, list_id: str) -> ListOut:
        """Fetch a list by id; raise 404 when missing."""
        list_id = list_id.strip()
        row = self._repo.find_by_id(list_id) if list_id else None
        if not row:
            logger.error("List with id %s not found.", list_id)
            raise HTTPException(status_code=404, detail="List not found")
        return self._row_to_listout(row)

    def create(self, payload: ListCreate) -> ListOut:
        """Validate header and card references, then store the list.

        Nothing is stored if any referenced card is missing.
        """
        header = payload.header.strip()
        if not header:
            logger.warning("List rejected: empty header")
            raise HTTPException(status_code=400, detail="Invalid data. Header required.")

        card_ids = [card_id.strip() for card_id in payload.card_ids]
        for card_id in card_ids:
            if not self._card_service.exists(card_id):
                logger.error("Card with id %s not found.", card_id)
                raise HTTPException(
                    status_code=400, detail=f"Card with id {card_id} does not exist"
                )

        list_id = self._id_factory()
        row = self._repo.insert(list_id=list_id, header=header, card_ids=card_ids)
        logger.info("List with id %s created", list_id)
        return self._row_to_listout(row)

    def delete(self, list_id: str) -> None:
        """Delete a list by id; raise 404 when not found. Cards are untouched."""
        list_id = list_id.strip()
        deleted = self._repo.delete_by_id(list_id)
        if deleted == 0:
            logger.error("List with id %s not found.", list_id)
            raise HTTPException(status_code=404, detail="List not found")
        logger.info("List with id %s deleted.", list_id)

    @staticmethod
    def _row_to_listout(row: Mapping[str, Any]) -> ListOut:
        return ListOut(id=row["id"], header=row["header"], card_ids=list(row["cardIds"]))
