"""Tests for round state machine."""

import logging

import pytest
from pydantic import ValidationError

from president_rules.config import Config, TableConfig
from president_rules.game.analyzer import build_move
from president_rules.game.engine import RoundEngine, attempt_play
from president_rules.game.validator import PlayError, PlayValidator
from president_rules.logging.formatters import parse_card, parse_cards
from president_rules.models.move import Pass, Single
from president_rules.models.round import Round


@pytest.fixture
def engine():
    return RoundEngine()


def single(code):
    return Single(card=parse_card(code))


def move(text):
    result = build_move(parse_cards(text))
    assert result is not None
    return result


class TestTurnOrder:
    """Tests for turn ownership and rotation."""

    def test_wrong_player_rejected(self, engine):
        """Test that acting out of turn returns the identical round."""
        round_ = Round(players=(1, 2, 3), current_player=1, last_move=single("S7"))

        result = engine.attempt_play(round_, 2, single("S9"))

        assert not result.accepted
        assert result.error == PlayError.WRONG_PLAYER
        assert result.round is round_
        assert result.round == Round(players=(1, 2, 3), current_player=1, last_move=single("S7"))

    def test_wrong_player_cannot_pass(self, engine):
        """Test that even a pass needs the turn."""
        round_ = Round(players=(1, 2, 3), current_player=1)

        result = engine.attempt_play(round_, 3, Pass())

        assert result.error == PlayError.WRONG_PLAYER

    @pytest.mark.parametrize("current, expected", [(1, 2), (2, 3), (3, 1)])
    def test_pass_rotates(self, engine, current, expected):
        """Test that an accepted pass advances the turn."""
        round_ = Round(players=(1, 2, 3), current_player=current)

        result = engine.attempt_play(round_, current, Pass())

        assert result.accepted
        assert result.round.current_player == expected

    def test_content_move_rotates(self, engine):
        """Test that an accepted content move advances the turn."""
        round_ = Round(players=(1, 2, 3), current_player=3, last_move=single("S7"))

        result = engine.attempt_play(round_, 3, single("S9"))

        assert result.accepted
        assert result.round.current_player == 1


class TestBaseline:
    """Tests for baseline handling."""

    def test_pass_keeps_baseline(self, engine):
        """Test that passing does not replace the move to beat."""
        baseline = single("S7")
        round_ = Round(players=(1, 2, 3), current_player=1, last_move=baseline)

        after_pass = engine.attempt_play(round_, 1, Pass()).round

        assert after_pass.last_move == baseline
        assert after_pass.current_player == 2

        weaker = engine.attempt_play(after_pass, 2, single("S5"))
        assert not weaker.accepted
        assert weaker.error == PlayError.NOT_STRONGER

        stronger = engine.attempt_play(after_pass, 2, single("S8"))
        assert stronger.accepted
        assert stronger.round.last_move == single("S8")

    def test_opener_sets_baseline(self, engine):
        """Test that any move opens over a pass baseline."""
        round_ = Round(players=(1, 2), current_player=1)

        result = engine.attempt_play(round_, 1, move("S9 H9 D9 C3 S3"))

        assert result.accepted
        assert result.round.last_move == move("S9 H9 D9 C3 S3")

    def test_pass_over_pass_baseline(self, engine):
        """Test that passing on an empty table keeps a pass baseline."""
        round_ = Round(players=(1, 2), current_player=2)

        result = engine.attempt_play(round_, 2, Pass())

        assert result.accepted
        assert result.round.last_move == Pass()
        assert result.round.current_player == 1


class TestLegality:
    """Tests for category and strength checks."""

    @pytest.mark.parametrize(
        "baseline, proposed",
        [
            ("S7", "D8 C8"),
            ("D8 C8", "D9 C9 H9"),
            ("D3 C3 H3", "D3 C4 H5 S6 D7"),
            ("D3 C4 H5 S6 D7", "S2"),
        ],
    )
    def test_category_mismatch(self, engine, baseline, proposed):
        """Test that categories never cross, whatever the strength."""
        round_ = Round(players=(1, 2), current_player=1, last_move=move(baseline))

        result = engine.attempt_play(round_, 1, move(proposed))

        assert not result.accepted
        assert result.error == PlayError.CATEGORY_MISMATCH
        assert result.round is round_

    def test_equal_move_not_stronger(self, engine):
        """Test that matching the baseline is not enough."""
        round_ = Round(players=(1, 2), current_player=1, last_move=single("H9"))

        result = engine.attempt_play(round_, 1, single("H9"))

        assert result.error == PlayError.NOT_STRONGER

    def test_stronger_trick_kind(self, engine):
        """Test that a higher trick kind beats a lower one."""
        round_ = Round(players=(1, 2), current_player=2, last_move=move("DJ CQ HK SA D2"))

        result = engine.attempt_play(round_, 2, move("H3 H5 H9 HJ HA"))

        assert result.accepted
        assert result.round.current_player == 1

    def test_end_to_end(self, engine):
        """Test a short sequence of plays between two players."""
        round_ = Round(players=(1, 2), current_player=1, last_move=Pass())

        first = engine.attempt_play(round_, 1, single("H5"))
        assert first.round == Round(players=(1, 2), current_player=2, last_move=single("H5"))

        low = engine.attempt_play(first.round, 2, single("H3"))
        assert not low.accepted
        assert low.round is first.round

        high = engine.attempt_play(first.round, 2, single("H9"))
        assert high.round == Round(players=(1, 2), current_player=1, last_move=single("H9"))


class TestPlayCards:
    """Tests for the classify-then-play pipeline."""

    def test_play_cards_accepted(self, engine):
        """Test playing raw cards."""
        round_ = Round(players=(1, 2), current_player=1)

        result = engine.play_cards(round_, 1, parse_cards("S5 H5"))

        assert result.accepted
        assert result.round.last_move == move("S5 H5")

    def test_play_cards_invalid(self, engine):
        """Test that unclassifiable cards are rejected unchanged."""
        round_ = Round(players=(1, 2), current_player=1)

        result = engine.play_cards(round_, 1, parse_cards("S5 H6"))

        assert not result.accepted
        assert result.error == PlayError.INVALID_CARDS
        assert "RANK_MISMATCH" in result.error_message
        assert result.round is round_

    def test_play_no_cards_is_pass(self, engine):
        """Test that an empty selection passes."""
        round_ = Round(players=(1, 2), current_player=1, last_move=single("S7"))

        result = engine.play_cards(round_, 1, [])

        assert result.accepted
        assert result.round.last_move == single("S7")


class TestEngineSetup:
    """Tests for engine construction and helpers."""

    def test_new_round_from_config(self):
        """Test opening a round with the configured roster."""
        engine = RoundEngine(Config(table=TableConfig(players=[4, 5, 6], first_player=5)))

        round_ = engine.new_round()

        assert round_.players == (4, 5, 6)
        assert round_.current_player == 5
        assert round_.last_move == Pass()

    def test_new_round_explicit_roster(self, engine):
        """Test that an explicit roster defaults to its first player."""
        round_ = engine.new_round(players=[10, 20])

        assert round_.current_player == 10

    def test_new_round_explicit_roster_ignores_configured_first(self, engine):
        """Test that the configured first player does not override an explicit roster."""
        round_ = engine.new_round(players=[10, 0])

        assert round_.current_player == 10

    def test_new_round_explicit_first_player(self, engine):
        """Test choosing the first player of an explicit roster."""
        round_ = engine.new_round(players=[10, 20], first_player=20)

        assert round_.current_player == 20

    def test_new_round_empty_roster(self, engine):
        """Test that an empty roster fails validation."""
        with pytest.raises(ValidationError):
            engine.new_round(players=[])

    def test_from_config(self, tmp_path, monkeypatch):
        """Test building an engine from a YAML file."""
        levels = []
        monkeypatch.setattr(
            "president_rules.game.engine.setup_logging", lambda level: levels.append(level)
        )
        path = tmp_path / "config.yaml"
        path.write_text("table:\n  players: [3, 1, 2]\n  first_player: 1\nlogging:\n  level: DEBUG\n")

        engine = RoundEngine.from_config(path)
        round_ = engine.new_round()

        assert levels == ["DEBUG"]
        assert round_.players == (3, 1, 2)
        assert round_.current_player == 1

    def test_from_config_missing_file(self, tmp_path, monkeypatch):
        """Test that a missing file gives the default table."""
        monkeypatch.setattr("president_rules.game.engine.setup_logging", lambda level: None)

        engine = RoundEngine.from_config(tmp_path / "missing.yaml")

        assert engine.config == Config()

    def test_custom_validator(self):
        """Test that the engine uses the validator it is given."""
        validator = PlayValidator()
        engine = RoundEngine(validator=validator)
        assert engine.validator is validator

    def test_module_attempt_play(self):
        """Test the module-level helper."""
        round_ = Round(players=(1, 2), current_player=1)

        result = attempt_play(round_, 1, single("D3"))

        assert result.accepted
        assert result.round.current_player == 2

    def test_rejection_logged(self, engine, caplog):
        """Test that rejections are logged with card codes."""
        round_ = Round(players=(1, 2), current_player=1, last_move=single("H9"))

        with caplog.at_level(logging.INFO, logger="president_rules.game.engine"):
            engine.attempt_play(round_, 1, single("H5"))

        assert "single(H5)" in caplog.text
