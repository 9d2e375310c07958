"""Round state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from president_rules.config import Config, load_config
from president_rules.logging.formatters import format_cards, format_move
from president_rules.models.card import Card
from president_rules.models.move import Move, Pass
from president_rules.models.round import Round
from president_rules.utils.logger import setup_logging

from .analyzer import MoveClassifier
from .validator import PlayError, PlayValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayResult:
    """Outcome of one play attempt.

    On rejection ``round`` is the unchanged round that was passed in.
    """

    accepted: bool
    round: Round
    error: PlayError = PlayError.NONE
    error_message: str = ""


class RoundEngine:
    """Drives turn rotation and play legality for a round."""

    def __init__(
        self,
        config: Config | None = None,
        classifier: MoveClassifier | None = None,
        validator: PlayValidator | None = None,
    ):
        """Initialize round engine.

        Args:
            config: Configuration (uses defaults if not provided)
            classifier: MoveClassifier instance (creates one if not provided)
            validator: PlayValidator instance (creates one if not provided)
        """
        self.config = config or Config()
        self.classifier = classifier or MoveClassifier()
        self.validator = validator or PlayValidator()

    @classmethod
    def from_config(cls, path: Path | str | None = None) -> RoundEngine:
        """Create an engine from a YAML config file and set up logging.

        Args:
            path: Path to config file. If None, uses default config.

        Returns:
            RoundEngine using the loaded configuration
        """
        config = load_config(path)
        setup_logging(config.logging.level)
        logger.debug(f"Loaded config: players={config.table.players}")
        return cls(config)

    def new_round(
        self,
        players: Sequence[int] | None = None,
        first_player: int | None = None,
    ) -> Round:
        """Open a round with a pass baseline.

        Args:
            players: Roster in rotation order (uses config if not specified)
            first_player: Player to act first (uses config if not specified)

        Returns:
            The opening Round
        """
        table = self.config.table
        if players is None:
            players = table.players
            if first_player is None:
                first_player = table.first_player
        elif first_player is None and players:
            first_player = players[0]
        # Round validation rejects an empty roster
        return Round(players=tuple(players), current_player=first_player, last_move=Pass())

    def attempt_play(self, round_: Round, player_id: int, move: Move) -> PlayResult:
        """Attempt a play in the round.

        Args:
            round_: Current round
            player_id: Player attempting the play
            move: Proposed move

        Returns:
            PlayResult with the successor round, or the unchanged round
        """
        validation = self.validator.validate(round_, player_id, move)

        if not validation.is_valid:
            logger.info(
                f"Rejected {format_move(move)} from player {player_id}: "
                f"{validation.error_message}"
            )
            return PlayResult(
                accepted=False,
                round=round_,
                error=validation.error,
                error_message=validation.error_message,
            )

        # A pass never becomes the baseline
        baseline = round_.last_move if validation.is_pass else move
        next_round = round_.advance(baseline)

        logger.debug(
            f"Player {player_id} played {format_move(move)}, "
            f"next player {next_round.current_player}"
        )
        return PlayResult(accepted=True, round=next_round)

    def play_cards(self, round_: Round, player_id: int, cards: Sequence[Card]) -> PlayResult:
        """Classify raw cards and attempt them as a play.

        Args:
            round_: Current round
            player_id: Player attempting the play
            cards: Cards in the order they were supplied

        Returns:
            PlayResult; unclassifiable cards are rejected with INVALID_CARDS
        """
        classification = self.classifier.classify(cards)

        if classification.move is None:
            message = f"Invalid card combination: {classification.error.name}"
            logger.info(f"Rejected [{format_cards(cards)}] from player {player_id}: {message}")
            return PlayResult(
                accepted=False,
                round=round_,
                error=PlayError.INVALID_CARDS,
                error_message=message,
            )

        return self.attempt_play(round_, player_id, classification.move)


_default_engine = RoundEngine()


def attempt_play(round_: Round, player_id: int, move: Move) -> PlayResult:
    """Attempt a play using the default engine."""
    return _default_engine.attempt_play(round_, player_id, move)
