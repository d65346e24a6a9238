"""Raw access to the Magic: The Gathering cards endpoint.

See: https://docs.magicthegathering.io/
"""

import logging
from typing import Optional

import httpx

from mtg_cards.config import settings
from mtg_cards.errors import RequestFailed, TransportError

logger = logging.getLogger(__name__)

# Body the API sends back when a query matched nothing
EMPTY_CARDS = '{"cards":[]}'


class CardsAPI:
    """Thin async client for the ``/cards`` endpoint.

    Each lookup performs a single GET and returns the response untouched
    as long as the status code is a success. Nothing is cached, retried
    or shared between calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Cards endpoint (default: ``settings.cards_url``)
            transport: Optional httpx transport, e.g. a ``MockTransport`` in tests
        """
        self.base_url = (base_url or settings.cards_url).rstrip("/")
        self._transport = transport

    async def card_id_info(self, card_id: str) -> httpx.Response:
        """Find a card by its numerical ID."""
        return await self._get(f"{self.base_url}/{card_id}")

    async def card_exact_name_info(self, card_name: str) -> httpx.Response:
        """Find cards by their exact name.

        The API only matches exactly when the name is wrapped in quotes.
        """
        return await self._get(f'{self.base_url}?name="{card_name}"')

    async def card_page(self, page: str) -> httpx.Response:
        """Fetch one page of the full card listing."""
        return await self._get(f"{self.base_url}?page={page}")

    async def _get(self, url: str) -> httpx.Response:
        """Perform the GET request and check the status code.

        Raises:
            TransportError: If no response could be obtained
            RequestFailed: If the response status is not 2xx
        """
        logger.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise RequestFailed(response.status_code)

        logger.debug(f"GET {url} returned {len(response.content)} bytes")
        return response


def check_for_empty(response: httpx.Response) -> Optional[str]:
    """Return the body text, or None if it is the empty card list."""
    text = response.text
    if text == EMPTY_CARDS:
        return None
    return text
