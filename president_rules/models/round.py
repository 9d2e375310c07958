"""Round state model."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .move import Move, Pass


class Round(BaseModel, frozen=True):
    """State of one contiguous sequence of plays.

    Rounds are immutable; every accepted play produces a new Round.
    """

    players: tuple[int, ...]  # Roster in rotation order
    current_player: int  # Player ID whose move is awaited
    last_move: Move = Field(default_factory=Pass)  # Baseline to beat

    @field_validator("players")
    @classmethod
    def _check_players(cls, players: tuple[int, ...]) -> tuple[int, ...]:
        if not players:
            raise ValueError("Round needs at least one player")
        if len(set(players)) != len(players):
            raise ValueError(f"Duplicate player IDs in roster: {players}")
        return players

    @model_validator(mode="after")
    def _check_current_player(self) -> "Round":
        if self.current_player not in self.players:
            raise ValueError(
                f"Current player {self.current_player} is not in the roster {self.players}"
            )
        return self

    @property
    def next_player(self) -> int:
        """Player after the current one, wrapping from last to first."""
        index = self.players.index(self.current_player)
        return self.players[(index + 1) % len(self.players)]

    def advance(self, last_move: Move) -> "Round":
        """Return the successor round with the given baseline."""
        return self.model_copy(
            update={"current_player": self.next_player, "last_move": last_move}
        )

    def __str__(self) -> str:
        return f"Round(players={list(self.players)}, current={self.current_player})"
