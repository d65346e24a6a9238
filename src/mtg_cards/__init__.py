"""Client for the Magic: The Gathering cards API."""

__version__ = "0.1.0"

from mtg_cards.api import CardsAPI
from mtg_cards.core import CardFinder
from mtg_cards.display import render, render_rich
from mtg_cards.errors import (
    APIError,
    CardError,
    DeserializationError,
    HeaderConversionError,
    HeaderError,
    HeaderItemMissing,
    MTGError,
    NoCardFound,
    NoSuchCardName,
    RequestFailed,
    TransportError,
)
from mtg_cards.headers import CardsHeader
from mtg_cards.models import Card, IndiCard, MultiCards

__all__ = [
    "CardsAPI",
    "CardFinder",
    "CardsHeader",
    "Card",
    "IndiCard",
    "MultiCards",
    "render",
    "render_rich",
    "MTGError",
    "APIError",
    "RequestFailed",
    "TransportError",
    "CardError",
    "NoCardFound",
    "NoSuchCardName",
    "DeserializationError",
    "HeaderError",
    "HeaderItemMissing",
    "HeaderConversionError",
]
