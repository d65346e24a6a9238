"""Card lookups built on the raw API client."""

import logging
from typing import Optional

from mtg_cards.api import CardsAPI, check_for_empty
from mtg_cards.errors import NoSuchCardName
from mtg_cards.headers import CardsHeader
from mtg_cards.models import IndiCard, MultiCards

logger = logging.getLogger(__name__)


class CardFinder:
    """Main class for finding Magic: The Gathering cards."""

    def __init__(self, api: Optional[CardsAPI] = None) -> None:
        """Initialize the card finder.

        Args:
            api: Client used for requests (default: CardsAPI using the configured URL)
        """
        self.api = api or CardsAPI()

    async def id_find(self, card_id: int) -> IndiCard:
        """Find a card by its ID.

        Args:
            card_id: The card's numerical ID

        Returns:
            The card wrapped in an IndiCard
        """
        logger.info(f"Looking up card {card_id}")
        response = await self.api.card_id_info(str(card_id))
        return IndiCard.from_response(response)

    async def name_find(self, name: str) -> MultiCards:
        """Find all printings of a card by its exact name.

        Args:
            name: The exact card name

        Returns:
            The matching cards

        Raises:
            NoSuchCardName: If no card has that name
        """
        logger.info(f"Looking up cards named {name!r}")
        response = await self.api.card_exact_name_info(name)
        if check_for_empty(response) is None:
            raise NoSuchCardName(name)
        return MultiCards.from_response(response)

    async def page_find(self, number: int) -> MultiCards:
        """Fetch a page of the card listing.

        Args:
            number: Page number

        Returns:
            The cards on that page
        """
        logger.info(f"Fetching page {number}")
        response = await self.api.card_page(str(number))
        return MultiCards.from_response(response)

    async def page_header(self, number: int) -> CardsHeader:
        """Fetch the pagination and rate-limit headers for a page."""
        response = await self.api.card_page(str(number))
        return CardsHeader.from_response(response)

    async def page_find_with_header(self, number: int) -> tuple[MultiCards, CardsHeader]:
        """Fetch a page of cards together with its headers in one request."""
        logger.info(f"Fetching page {number}")
        response = await self.api.card_page(str(number))
        return MultiCards.from_response(response), CardsHeader.from_response(response)
