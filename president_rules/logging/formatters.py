"""Formatters for card and move log output."""

from typing import Iterable

from president_rules.models.card import RANK_NAMES, Card, Rank, Suit
from president_rules.models.move import FiveCardTrick, Move, Pass

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

# Rank codes for log output (same as the display names)
RANK_CODES: dict[Rank, str] = RANK_NAMES

_SUITS_BY_CODE = {code: suit for suit, code in SUIT_CODES.items()}
_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for Spade 3, "H10" for Heart 10).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_move(move: Move) -> str:
    """Format a move to string.

    Args:
        move: Move to format.

    Returns:
        "pass", or the category name with its cards (e.g., "pair(S5,H5)",
        "full_house(S5,H5,D5,C9,D9)").
    """
    if isinstance(move, Pass):
        return "pass"
    if isinstance(move, FiveCardTrick):
        name = move.trick.kind.name.lower()
    else:
        name = move.kind
    return f"{name}({format_cards(move.cards)})"


def parse_card(code: str) -> Card:
    """Parse a card code such as "S3" or "h10".

    Raises:
        ValueError: If the code names no card.
    """
    code = code.strip().upper()
    suit = _SUITS_BY_CODE.get(code[:1])
    rank = _RANKS_BY_CODE.get(code[1:])
    if suit is None or rank is None:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card(suit=suit, rank=rank)


def parse_cards(text: str) -> list[Card]:
    """Parse comma- or space-separated card codes, keeping their order.

    Raises:
        ValueError: If any code names no card.
    """
    codes = text.replace(",", " ").split()
    return [parse_card(code) for code in codes]
