"""Play validation against the current round."""

from dataclasses import dataclass
from enum import IntEnum

from president_rules.models.move import Move, Pass, beats, same_category
from president_rules.models.round import Round


class PlayError(IntEnum):
    """Reasons a play is rejected."""

    NONE = 0
    WRONG_PLAYER = 1  # Not the acting player's turn
    CATEGORY_MISMATCH = 2  # Different category from the baseline
    NOT_STRONGER = 3  # Same category but does not beat the baseline
    INVALID_CARDS = 4  # Cards did not classify as a move


@dataclass
class ValidationResult:
    """Result of play validation."""

    is_valid: bool
    error: PlayError = PlayError.NONE
    error_message: str = ""
    is_pass: bool = False


class PlayValidator:
    """Validates proposed moves against a round's baseline."""

    def validate(self, round_: Round, player_id: int, move: Move) -> ValidationResult:
        """Validate a proposed play.

        Args:
            round_: Current round
            player_id: Player attempting the play
            move: Proposed move

        Returns:
            ValidationResult
        """
        if player_id != round_.current_player:
            return ValidationResult(
                is_valid=False,
                error=PlayError.WRONG_PLAYER,
                error_message=(
                    f"Player {player_id} acted out of turn "
                    f"(waiting for player {round_.current_player})"
                ),
            )

        # A pass is always legal on your turn
        if isinstance(move, Pass):
            return ValidationResult(is_valid=True, is_pass=True)

        # Nothing to beat yet, any move opens
        if isinstance(round_.last_move, Pass):
            return ValidationResult(is_valid=True)

        return self._compare_with_baseline(move, round_.last_move)

    def _compare_with_baseline(self, move: Move, baseline: Move) -> ValidationResult:
        """Compare a content move with a content baseline."""
        if not same_category(move, baseline):
            return ValidationResult(
                is_valid=False,
                error=PlayError.CATEGORY_MISMATCH,
                error_message=f"Category mismatch: {move.kind} vs {baseline.kind}",
            )

        if not beats(move, baseline):
            return ValidationResult(
                is_valid=False,
                error=PlayError.NOT_STRONGER,
                error_message=f"Submitted {move.kind} is not stronger",
            )

        return ValidationResult(is_valid=True)
