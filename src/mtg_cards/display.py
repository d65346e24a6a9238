"""Fixed-width text rendering of cards."""

from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from mtg_cards.models import Card

LINE_WIDTH = 50


def divider(width: int, ch: str) -> str:
    """Divider line made of a single repeated character."""
    return ch * width


def cols(left: str, right: str, width: int) -> str:
    """Two columns with spaces used as padding between.

    At least one space is always inserted, so a row that doesn't fit
    simply runs past ``width``.
    """
    pad = max(1, width - len(left) - len(right))
    return f"{left}{' ' * pad}{right}"


def wrap(body: str, width: int) -> str:
    """Wrap a block of text to a line limit.

    Breaks every ``width`` characters regardless of word boundaries.
    Newlines already in ``body`` are kept and restart the count.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    out = []
    count = 0
    for ch in body:
        if ch == "\n":
            count = 0
        elif count == width:
            out.append("\n")
            count = 1
        else:
            count += 1
        out.append(ch)
    return "".join(out)


def _blocks(card: "Card", width: int) -> tuple[str, str, str]:
    head = "\n".join(
        [
            divider(width, "*"),
            cols(card.name, card.mana_cost, width),
            divider(width, "-"),
            cols(card.type_line, card.rarity, width),
            divider(width, "-"),
            wrap(card.text, width),
            "",
        ]
    )
    flavor = wrap(card.flavor, width)
    tail = "\n".join(
        [
            "",
            cols("", card.set_name, width),
            divider(width, "*"),
            "",
        ]
    )
    return head, flavor, tail


def render(card: "Card", width: int = LINE_WIDTH) -> str:
    """Render a card as a bordered block of text."""
    return "".join(_blocks(card, width))


def render_rich(card: "Card", width: int = LINE_WIDTH) -> Text:
    """Render a card for a rich console, with the flavor text in italics."""
    head, flavor, tail = _blocks(card, width)
    text = Text(head)
    text.append(flavor, style="italic")
    text.append(tail)
    return text
