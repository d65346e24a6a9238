"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
from mtg_cards.api import EMPTY_CARDS, CardsAPI
from mtg_cards.core import CardFinder
from mtg_cards.models import Card

BASE_URL = "https://api.test/v1/cards"

NARSET = {
    "name": "Narset, Enlightened Master",
    "manaCost": "{3}{U}{R}{W}",
    "cmc": 6,
    "colors": ["White", "Blue", "Red"],
    "type": "Legendary Creature — Human Monk",
    "rarity": "Mythic",
    "set": "KTK",
    "setName": "Khans of Tarkir",
    "text": (
        "First strike, hexproof\n"
        "Whenever Narset, Enlightened Master attacks, exile the top four cards "
        "of your library. Until end of turn, you may cast noncreature spells "
        "from among cards exiled with Narset this turn without paying their "
        "mana costs."
    ),
    "power": "3",
    "toughness": "2",
    "multiverseid": "386616",
}

ANCESTORS_CHOSEN = {
    "name": "Ancestor's Chosen",
    "manaCost": "{5}{W}{W}",
    "type": "Creature — Human Cleric",
    "rarity": "Uncommon",
    "setName": "Tenth Edition",
    "text": "First strike (This creature deals combat damage before creatures "
    "without first strike.)\nWhen Ancestor's Chosen enters the battlefield, "
    "you gain 1 life for each card in your graveyard.",
    "flavor": "\"The will of all, by my hand done.\"",
}

PAGE_HEADERS = {
    "Link": f'<{BASE_URL}?page=2>; rel="next", <{BASE_URL}?page=937>; rel="last"',
    "Page-Size": "100",
    "Count": "100",
    "Total-Count": "93643",
    "Ratelimit-Limit": "1000",
    "Ratelimit-Remaining": "999",
}


def cards_api_handler(request: httpx.Request) -> httpx.Response:
    """Fake version of the cards endpoint with a couple of known cards."""
    path = request.url.path
    params = request.url.params

    if path.endswith("/cards/386616"):
        return httpx.Response(200, text=json.dumps({"card": NARSET}))
    if path.endswith("/cards"):
        if "name" in params:
            if params["name"] == '"Narset, Enlightened Master"':
                return httpx.Response(200, text=json.dumps({"cards": [NARSET]}))
            return httpx.Response(200, text=EMPTY_CARDS)
        if "page" in params:
            if params["page"] == "1":
                body = json.dumps({"cards": [ANCESTORS_CHOSEN, NARSET]})
                return httpx.Response(200, text=body, headers=PAGE_HEADERS)
            return httpx.Response(200, text=EMPTY_CARDS, headers=PAGE_HEADERS)
    return httpx.Response(404, json={"status": 404, "error": "not-found"})


@pytest.fixture
def cards_api() -> CardsAPI:
    """Provide a CardsAPI backed by the fake endpoint."""
    return CardsAPI(BASE_URL, transport=httpx.MockTransport(cards_api_handler))


@pytest.fixture
def card_finder(cards_api: CardsAPI) -> CardFinder:
    """Provide a CardFinder backed by the fake endpoint."""
    return CardFinder(cards_api)


@pytest.fixture
def placeholder_card() -> Card:
    """Provide a card whose fields are short placeholder strings."""
    return Card(
        name="name",
        mana_cost="mana",
        type_line="type",
        rarity="rarity",
        set_name="set",
        text="body",
        flavor="flavour",
    )


@pytest.fixture
def narset() -> Card:
    """Provide Narset, Enlightened Master as a Card."""
    return Card.model_validate(NARSET)


@pytest.fixture
def page_headers() -> dict:
    """Provide the headers sent with a page of the card listing."""
    return dict(PAGE_HEADERS)
