"""Data models for cards returned by the MTG API."""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from mtg_cards.api import check_for_empty
from mtg_cards.display import render
from mtg_cards.errors import DeserializationError, NoCardFound


class Card(BaseModel):
    """A single Magic: The Gathering card.

    Every field is optional in the API's JSON and falls back to an empty
    string, so an absent key and an empty value look the same.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    name: str = ""
    mana_cost: str = ""
    type_line: str = Field(default="", alias="type")
    rarity: str = ""
    set_name: str = ""
    text: str = ""
    flavor: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat an explicit JSON null like a missing key."""
        return "" if v is None else v

    def __str__(self) -> str:
        """Return the card rendered as a text block."""
        return render(self)


class _CardsPayload(BaseModel):
    """Shared parsing for the top-level response wrappers."""

    @classmethod
    def from_json(cls, json_text: str):
        """Deserialize a response body.

        Raises:
            DeserializationError: If the body is not valid JSON of the right shape
        """
        try:
            return cls.model_validate_json(json_text)
        except ValidationError as e:
            raise DeserializationError(str(e)) from e

    @classmethod
    def from_response(cls, response: httpx.Response):
        """Deserialize a response, or raise NoCardFound for the empty list."""
        json_text = check_for_empty(response)
        if json_text is None:
            raise NoCardFound()
        return cls.from_json(json_text)


class IndiCard(_CardsPayload):
    """Wrapper for the ``{"card": {...}}`` response."""

    card: Card


class MultiCards(_CardsPayload):
    """Wrapper for the ``{"cards": [...]}`` response."""

    cards: list[Card]
