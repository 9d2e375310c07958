"""Move and five-card trick models.

A move is one of a closed set of variants discriminated by ``kind``:

- Pass: no cards
- Single: one card
- Pair: two cards of the same rank
- Prial: three cards of the same rank
- FiveCardTrick: five cards forming a Trick

Cards are kept in the order they were supplied. The order matters both for
straight detection and for comparing two moves of the same category.
"""

from collections import Counter
from enum import IntEnum
from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from .card import Card, Rank


class TrickKind(IntEnum):
    """Five-card trick categories, weakest first."""

    STRAIGHT = 0  # sequence
    FLUSH = 1  # same suit
    FULL_HOUSE = 2  # 3 over 2
    FOUR_OF_A_KIND = 3  # 4 of same, 1 different
    STRAIGHT_FLUSH = 4  # sequence of same suit
    FIVE_OF_A_KIND = 5  # 5 of same


def rank_counts(cards: Sequence[Card]) -> Counter[Rank]:
    """Count occurrences of each rank."""
    return Counter(card.rank for card in cards)


def is_straight(cards: Sequence[Card]) -> bool:
    """Check that every card is the rank successor of the card before it.

    The cards are checked in the order given; no sorting takes place.
    """
    return all(
        card.previous_rank is not None and card.previous_rank == prev.rank
        for prev, card in zip(cards, cards[1:])
    )


def is_flush(cards: Sequence[Card]) -> bool:
    """Check that all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def trick_shape_holds(kind: TrickKind, cards: Sequence[Card]) -> bool:
    """Check a trick kind's defining predicate over its cards."""
    counts = sorted(rank_counts(cards).values())
    match kind:
        case TrickKind.STRAIGHT:
            return is_straight(cards)
        case TrickKind.FLUSH:
            return counts == [1, 1, 1, 1, 1] and is_flush(cards)
        case TrickKind.FULL_HOUSE:
            return counts == [2, 3]
        case TrickKind.FOUR_OF_A_KIND:
            return counts == [1, 4]
        case TrickKind.STRAIGHT_FLUSH:
            return is_straight(cards) and is_flush(cards)
        case TrickKind.FIVE_OF_A_KIND:
            return counts == [5]
    raise ValueError(f"Unknown trick kind: {kind!r}")


class Trick(BaseModel, frozen=True):
    """A classified five-card hand."""

    kind: TrickKind
    cards: tuple[Card, Card, Card, Card, Card]

    @model_validator(mode="after")
    def _check_shape(self) -> "Trick":
        if not trick_shape_holds(self.kind, self.cards):
            raise ValueError(f"Cards do not form a {self.kind.name}")
        return self


class Pass(BaseModel, frozen=True):
    """No cards played."""

    kind: Literal["pass"] = "pass"

    @property
    def cards(self) -> tuple[Card, ...]:
        return ()


class Single(BaseModel, frozen=True):
    """One card."""

    kind: Literal["single"] = "single"
    card: Card

    @property
    def cards(self) -> tuple[Card, ...]:
        return (self.card,)


class Pair(BaseModel, frozen=True):
    """Two cards of matching rank."""

    kind: Literal["pair"] = "pair"
    cards: tuple[Card, Card]

    @model_validator(mode="after")
    def _check_ranks(self) -> "Pair":
        if len(rank_counts(self.cards)) != 1:
            raise ValueError("Pair cards must share one rank")
        return self


class Prial(BaseModel, frozen=True):
    """Three of a kind."""

    kind: Literal["prial"] = "prial"
    cards: tuple[Card, Card, Card]

    @model_validator(mode="after")
    def _check_ranks(self) -> "Prial":
        if len(rank_counts(self.cards)) != 1:
            raise ValueError("Prial cards must share one rank")
        return self


class FiveCardTrick(BaseModel, frozen=True):
    """Five cards forming a trick."""

    kind: Literal["five_card_trick"] = "five_card_trick"
    trick: Trick

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.trick.cards


Move = Annotated[
    Union[Pass, Single, Pair, Prial, FiveCardTrick],
    Field(discriminator="kind"),
]

# Validates and serializes any Move variant (e.g. MOVE_ADAPTER.dump_json(move))
MOVE_ADAPTER: TypeAdapter[Move] = TypeAdapter(Move)


def _card_keys(cards: Sequence[Card]) -> tuple[tuple[int, int], ...]:
    return tuple(card.sort_key for card in cards)


def move_key(move: Move) -> tuple:
    """Total ordering key for moves.

    Categories order as Pass < Single < Pair < Prial < FiveCardTrick.
    Within a category the cards are compared lexicographically in the
    order they were supplied; tricks compare by trick kind first.
    """
    match move:
        case Pass():
            return (0, ())
        case Single(card=card):
            return (1, (card.sort_key,))
        case Pair(cards=cards):
            return (2, _card_keys(cards))
        case Prial(cards=cards):
            return (3, _card_keys(cards))
        case FiveCardTrick(trick=trick):
            return (4, (int(trick.kind), *_card_keys(trick.cards)))
    raise TypeError(f"Not a move: {move!r}")


def compare_moves(a: Move, b: Move) -> int:
    """Compare two moves: -1 if a < b, 0 if equal, 1 if a > b."""
    key_a = move_key(a)
    key_b = move_key(b)
    return (key_a > key_b) - (key_a < key_b)


def same_category(a: Move, b: Move) -> bool:
    """Check whether two moves belong to the same move category."""
    return move_key(a)[0] == move_key(b)[0]


def beats(new: Move, old: Move) -> bool:
    """Check whether a content move legally beats a content baseline.

    Both moves must be of the same category and the new move must be
    strictly greater. Categories never beat each other.
    """
    if isinstance(new, Pass) or isinstance(old, Pass):
        return False
    return same_category(new, old) and move_key(new) > move_key(old)
