#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Board API – FastAPI + in-memory cards and lists
-----------------------------------------------

• Storage: process-wide in-memory store seeded with sample data (nothing is persisted)
• Auth: shared-secret bearer token (API_TOKEN) checked on every resource route
• Integrity: deleting a card removes its id from every list

Endpoints (public):
  - GET    /                  → plain-text greeting
  - GET    /health            → health check with current UTC timestamp

Endpoints (Cards):
  - GET    /card              → list cards
  - GET    /card/{card_id}    → card details
  - POST   /card              → create card (title, content)
  - DELETE /card/{card_id}    → delete card and drop it from every list

Endpoints (Lists):
  - GET    /list              → list lists
  - GET    /list/{list_id}    → list details
  - POST   /list              → create list (header, cardIds must reference existing cards)
  - DELETE /list/{list_id}    → delete list (cards are untouched)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from board import config, time_utils
from board.error_handlers import register_error_handlers
from board.logging_config import setup_logging
from board.middleware import register_middleware
from board.repositories import CardRepository, ListRepository
from board.schemas import CardCreate, CardOut, HealthOut, ListCreate, ListOut
from board.services import AuthService, CardService, ListService
from board.store import Store, store

# ---------------------------------
# Configuration
# ---------------------------------
API_TOKEN: Optional[str] = config.API_TOKEN
IS_PRODUCTION: bool = config.IS_PRODUCTION

utc_now = time_utils.utc_now

logger = logging.getLogger(__name__)


def get_store() -> Store:
    return store


def get_card_repository(board_store: Store = Depends(get_store)) -> CardRepository:
    return CardRepository(board_store)


def get_list_repository(board_store: Store = Depends(get_store)) -> ListRepository:
    return ListRepository(board_store)


def get_card_service(
    repo: CardRepository = Depends(get_card_repository),
) -> CardService:
    return CardService(repo)


def get_list_service(
    repo: ListRepository = Depends(get_list_repository),
    card_service: CardService = Depends(get_card_service),
) -> ListService:
    return ListService(repo, card_service)


def get_auth_service() -> AuthService:
    return AuthService(API_TOKEN)


# Paths that do not require authentication
PUBLIC_PATHS = [
    "/",
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
]


# ---------------
# FastAPI (app)
# ---------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan hook: configure logging and warn about a missing token."""
    setup_logging(config.LOG_LEVEL)
    if not API_TOKEN:
        logger.warning("API_TOKEN is not set; every protected request will be rejected")
    logger.info("Board API started (env=%s)", config.APP_ENV)
    yield


app = FastAPI(
    title="Board API",
    version="1.0",
    lifespan=lifespan,
)

register_middleware(
    app,
    verbose=lambda: not IS_PRODUCTION,
    auth_service=get_auth_service,
    public_paths=PUBLIC_PATHS,
)
register_error_handlers(app, is_production=lambda: IS_PRODUCTION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Hello, world!"


# ------------------------
# Endpoints – Cards
# ------------------------
@app.get("/card", response_model=List[CardOut])
def list_cards(card_service: CardService = Depends(get_card_service)):
    """List all cards."""
    return card_service.list()


@app.get("/card/{card_id}", response_model=CardOut)
def get_card(
    card_id: str,
    card_service: CardService = Depends(get_card_service),
):
    """Fetch a card by id."""
    return card_service.get(card_id)


@app.post("/card", response_model=CardOut, status_code=201)
def create_card(
    payload: CardCreate,
    request: Request,
    response: Response,
    card_service: CardService = Depends(get_card_service),
):
    """Create a card and point the Location header at it."""
    card = card_service.create(payload)
    response.headers["Location"] = str(request.url_for("get_card", card_id=card.id))
    return card


@app.delete("/card/{card_id}", status_code=204)
def delete_card(
    card_id: str,
    card_service: CardService = Depends(get_card_service),
):
    """Delete a card and remove its id from every list."""
    card_service.delete(card_id)
    return Response(status_code=204)


# ------------------------
# Endpoints – Lists
# ------------------------
@app.get("/list", response_model=List[ListOut])
def list_lists(list_service: ListService = Depends(get_list_service)):
    """List all lists."""
    return list_service.list()


@app.get("/list/{list_id}", response_model=ListOut)
def get_list(
    list_id: str,
    list_service: ListService = Depends(get_list_service),
):
    """Fetch a list by id."""
    return list_service.get(list_id)


@app.post("/list", response_model=ListOut, status_code=201)
def create_list(
    payload: ListCreate,
    request: Request,
    response: Response,
    list_service: ListService = Depends(get_list_service),
):
    """Create a list; every card id must reference an existing card."""
    board_list = list_service.create(payload)
    response.headers["Location"] = str(request.url_for("get_list", list_id=board_list.id))
    return board_list


@app.delete("/list/{list_id}", status_code=204)
def delete_list(
    list_id: str,
    list_service: ListService = Depends(get_list_service),
):
    """Delete a list by id."""
    list_service.delete(list_id)
    return Response(status_code=204)


# ------------------------
# Healthcheck
# ------------------------
@app.get("/health", response_model=HealthOut)
def health():
    """Simple health check endpoint with current UTC timestamp."""
    return {"status": "ok", "utc": utc_now().isoformat()}


# ------------------------
# Local execution
# ------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api:app", host=config.API_HOST, port=config.API_PORT, reload=config.API_RELOAD)
