"""Pagination and rate-limit information from card listing responses."""

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union

import httpx

from mtg_cards.errors import HeaderConversionError, HeaderItemMissing

_UNSIGNED = re.compile(r"\+?[0-9]+")

# Largest value of a 64-bit unsigned integer
MAX_UNSIGNED = 2**64 - 1

RawHeaders = Iterable[Tuple[bytes, bytes]]


@dataclass(frozen=True)
class CardsHeader:
    """
    Snapshot of the headers sent with a page of the card listing.

    Only the ``?page=`` endpoint sends these; all six are required.
    """

    link: str
    page_size: int
    count: int
    total_count: int
    ratelimit_limit: int
    ratelimit_remaining: int

    @classmethod
    def from_response(cls, response: httpx.Response) -> 'CardsHeader':
        """Build a header snapshot from a response."""
        return cls.from_headers(response.headers)

    @classmethod
    def from_headers(cls, headers: Union[Mapping[str, str], RawHeaders]) -> 'CardsHeader':
        """
        Build a header snapshot from a header mapping or raw byte pairs.

        Fields are read in order and the first missing or malformed one
        raises.

        Raises:
            HeaderItemMissing: If a header is absent
            HeaderConversionError: If a value is not ASCII or not an unsigned integer
        """
        if isinstance(headers, Mapping):
            raw = httpx.Headers(headers).raw
        else:
            raw = list(headers)
        return cls(
            link=_get_field(raw, "Link"),
            page_size=_parse_unsigned(_get_field(raw, "Page-Size")),
            count=_parse_unsigned(_get_field(raw, "Count")),
            total_count=_parse_unsigned(_get_field(raw, "Total-Count")),
            ratelimit_limit=_parse_unsigned(_get_field(raw, "Ratelimit-Limit")),
            ratelimit_remaining=_parse_unsigned(_get_field(raw, "Ratelimit-Remaining")),
        )


def _get_field(raw: RawHeaders, item: str) -> str:
    """Return the first value of header ``item`` as text."""
    wanted = item.lower().encode("ascii")
    for key, value in raw:
        if key.lower() == wanted:
            return _to_str(value)
    raise HeaderItemMissing(item)


def _to_str(value: bytes) -> str:
    # Only visible ASCII (and tabs) is accepted as header text
    if any((b < 0x20 and b != 0x09) or b >= 0x7F for b in value):
        raise HeaderConversionError("failed to convert header to a str")
    return value.decode("ascii")


def _parse_unsigned(value: str) -> int:
    if not value:
        raise HeaderConversionError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(value):
        raise HeaderConversionError("invalid digit found in string")
    number = int(value)
    if number > MAX_UNSIGNED:
        raise HeaderConversionError("number too large to fit in target type")
    return number
