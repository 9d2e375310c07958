"""Log output helpers."""

from .formatters import format_card, format_cards, format_move, parse_card, parse_cards

__all__ = [
    "format_card",
    "format_cards",
    "format_move",
    "parse_card",
    "parse_cards",
]
