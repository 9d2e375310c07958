"""Game models."""

from .card import Card, Rank, Suit
from .move import (
    FiveCardTrick,
    Move,
    Pair,
    Pass,
    Prial,
    Single,
    Trick,
    TrickKind,
)
from .round import Round

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Move",
    "Pass",
    "Single",
    "Pair",
    "Prial",
    "FiveCardTrick",
    "Trick",
    "TrickKind",
    "Round",
]
