"""Card model."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit, weakest first (Big Two order)."""

    DIAMOND = 0
    CLUB = 1
    HEART = 2
    SPADE = 3


class Rank(IntEnum):
    """Card rank.

    Strength order: 3 < 4 < ... < K < A < 2
    """

    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12
    TWO = 13


# Map rank to display string
RANK_NAMES = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
}

SUIT_SYMBOLS = {
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank

    @property
    def previous_rank(self) -> Rank | None:
        """Rank immediately below this card's rank (None for the lowest)."""
        if self.rank == Rank.THREE:
            return None
        return Rank(self.rank - 1)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Key for the total card order: rank first, suit breaks ties."""
        return (int(self.rank), int(self.suit))

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def create_full_deck() -> list[Card]:
    """Create a standard 52-card deck, ordered weakest to strongest."""
    return sorted(Card(suit=suit, rank=rank) for suit in Suit for rank in Rank)
