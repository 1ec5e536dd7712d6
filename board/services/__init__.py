"""Domain services built on top of repositories."""

from .auth_service import AuthService
from .card_service import CardService
from .list_service import ListService

__all__ = ["AuthService", "CardService", "ListService"]
