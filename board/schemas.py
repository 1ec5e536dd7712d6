"""Pydantic schemas for request and response payloads."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_card_id(value: Any) -> Any:
    # JSON integers are accepted as ids; booleans are not.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class CardCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class CardOut(BaseModel):
    id: str
    title: str
    content: str


class ListCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    header: str = Field(..., min_length=1)
    card_ids: List[str] = Field(
        default_factory=list,
        alias="cardIds",
        description="Ids of existing cards, in display order",
    )

    @field_validator("card_ids", mode="before")
    @classmethod
    def _normalize_card_ids(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [_normalize_card_id(item) for item in value]
        return value


class ListOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    header: str
    card_ids: List[str] = Field(..., alias="cardIds")


class HealthOut(BaseModel):
    status: str
    utc: str
