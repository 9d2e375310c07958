"""Move classification for submitted cards."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from president_rules.logging.formatters import format_cards
from president_rules.models.card import Card
from president_rules.models.move import (
    FiveCardTrick,
    Move,
    Pair,
    Pass,
    Prial,
    Single,
    Trick,
    TrickKind,
    is_flush,
    is_straight,
    rank_counts,
)

logger = logging.getLogger(__name__)


class ClassificationError(IntEnum):
    """Reasons submitted cards do not form a move."""

    NONE = 0
    INVALID_COUNT = 1  # Not 0, 1, 2, 3 or 5 cards
    RANK_MISMATCH = 2  # Pair/prial cards of different ranks
    INVALID_TRICK = 3  # Five cards that form no trick


@dataclass(frozen=True)
class Classification:
    """Result of classifying submitted cards."""

    move: Move | None
    error: ClassificationError = ClassificationError.NONE

    @property
    def is_valid(self) -> bool:
        """Check if the cards formed a move."""
        return self.error == ClassificationError.NONE


class MoveClassifier:
    """Converts a set of played cards into a typed move."""

    def classify(self, cards: Sequence[Card]) -> Classification:
        """Classify a submitted card combination.

        Args:
            cards: Cards in the order they were supplied

        Returns:
            Classification holding the move, or the rejection reason
        """
        cards = tuple(cards)

        match len(cards):
            case 0:
                result = Classification(Pass())
            case 1:
                result = Classification(Single(card=cards[0]))
            case 2:
                result = self._classify_same_rank(cards, Pair)
            case 3:
                result = self._classify_same_rank(cards, Prial)
            case 5:
                result = self._classify_five(cards)
            case _:
                result = Classification(None, ClassificationError.INVALID_COUNT)

        if not result.is_valid:
            logger.debug(f"Rejected [{format_cards(cards)}]: {result.error.name}")
        return result

    def _classify_same_rank(
        self,
        cards: tuple[Card, ...],
        move_type: type[Pair] | type[Prial],
    ) -> Classification:
        """Build a pair or prial if all cards share one rank."""
        if len(rank_counts(cards)) != 1:
            return Classification(None, ClassificationError.RANK_MISMATCH)
        return Classification(move_type(cards=cards))

    def _classify_five(self, cards: tuple[Card, ...]) -> Classification:
        """Classify five cards into a trick.

        Args:
            cards: Exactly five cards

        Returns:
            Classification with a FiveCardTrick, or INVALID_TRICK
        """
        counts = sorted(rank_counts(cards).values())
        kind: TrickKind | None = None

        match len(counts):
            case 1:
                kind = TrickKind.FIVE_OF_A_KIND
            case 2:
                if counts == [2, 3]:
                    kind = TrickKind.FULL_HOUSE
                elif counts == [1, 4]:
                    kind = TrickKind.FOUR_OF_A_KIND
            case 5:
                # Straightness follows supplied order, the cards are not sorted
                straight = is_straight(cards)
                flush = is_flush(cards)
                if straight and flush:
                    kind = TrickKind.STRAIGHT_FLUSH
                elif straight:
                    kind = TrickKind.STRAIGHT
                elif flush:
                    kind = TrickKind.FLUSH

        if kind is None:
            return Classification(None, ClassificationError.INVALID_TRICK)
        return Classification(FiveCardTrick(trick=Trick(kind=kind, cards=cards)))


_default_classifier = MoveClassifier()


def build_move(cards: Sequence[Card]) -> Move | None:
    """Build a move from cards, or None if they form no legal move."""
    return _default_classifier.classify(cards).move
