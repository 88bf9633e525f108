"""Tests for GameModel — the public move, glyph and persistence API."""

from __future__ import annotations

from pathlib import Path

import pytest

from gambit.core.enums import Color
from gambit.core.messages import MoveIntent, MoveNotification, Notification, ResetNotification
from gambit.core.savefile import SaveFormatError
from gambit.core.types import Coord
from gambit.game.model import GameModel
from gambit.game.settings import GameSettings

FOOLS_MATE = [((6, 5), (5, 5)), ((1, 4), (3, 4)), ((6, 6), (4, 6)), ((0, 3), (4, 7))]


def _recorder(model: GameModel) -> list[Notification]:
    seen: list[Notification] = []
    model.subscribe(seen.append)
    return seen


class TestQueries:
    def test_glyphs(self) -> None:
        model = GameModel()
        assert model.piece_glyph_at((7, 4)) == "♔"
        assert model.piece_glyph_at((0, 3)) == "♛"
        assert model.piece_glyph_at((4, 4)) == ""

    def test_glyph_off_board(self) -> None:
        model = GameModel()
        assert model.piece_glyph_at((8, 8)) == ""
        assert model.piece_glyph_at((-1, 0)) == ""

    def test_try_select_origin(self) -> None:
        model = GameModel()
        assert model.try_select_origin((6, 0))
        assert not model.try_select_origin((1, 0))
        assert not model.try_select_origin((3, 3))

    def test_legal_destinations_from(self) -> None:
        model = GameModel()
        assert model.legal_destinations_from((7, 6)) == {Coord(5, 5), Coord(5, 7)}
        assert model.legal_destinations_from((1, 0)) == set()

    def test_is_legal_destination_has_no_side_effects(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        before = model.save()
        assert model.is_legal_destination((6, 3), (4, 3))
        assert not model.is_legal_destination((6, 3), (3, 3))
        assert model.save() == before
        assert seen == []


class TestCommit:
    def test_commit_publishes(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        assert model.commit_move((6, 4), (4, 4))
        assert len(seen) == 1
        note = seen[0]
        assert isinstance(note, MoveNotification)
        assert note.changed_squares == {Coord(6, 4), Coord(4, 4)}
        assert model.last_notification is note
        assert model.side_to_move == Color.BLACK

    def test_rejected_commit_is_silent(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        assert not model.commit_move((6, 4), (3, 4))
        assert seen == []
        assert model.last_notification is None
        assert model.white_to_move

    def test_unsubscribe(self) -> None:
        model = GameModel()
        seen: list[Notification] = []
        unsubscribe = model.subscribe(seen.append)
        unsubscribe()
        model.commit_move((6, 4), (4, 4))
        model.new_game()
        assert seen == []

    def test_fools_mate(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        for origin, dest in FOOLS_MATE:
            assert model.commit_move(origin, dest)
        last = seen[-1]
        assert isinstance(last, MoveNotification)
        assert last.is_check
        assert last.is_checkmate
        assert model.is_in_check(Color.WHITE)

    def test_castle_notification(self) -> None:
        model = GameModel()
        model.load("true\n7 4 K true\n7 7 R true\n0 4 K false\n")
        seen = _recorder(model)
        assert model.commit_move((7, 4), (7, 7))
        note = seen[0]
        assert isinstance(note, MoveNotification)
        assert note.is_castle
        assert note.changed_squares == {
            Coord(7, 4), Coord(7, 7), Coord(7, 6), Coord(7, 5),
        }
        assert model.piece_glyph_at((7, 6)) == "♔"
        assert model.piece_glyph_at((7, 5)) == "♖"


class TestNetworkedCommit:
    def test_returns_intent_without_publishing(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        intent = model.commit_networked_move((6, 4), (4, 4))
        assert intent == MoveIntent(Coord(6, 4), Coord(4, 4))
        assert seen == []
        assert model.side_to_move == Color.BLACK
        assert model.last_notification is not None

    def test_rejected_returns_none(self) -> None:
        model = GameModel()
        assert model.commit_networked_move((6, 4), (2, 4)) is None
        assert model.white_to_move

    def test_publish_later(self) -> None:
        model = GameModel()
        seen = _recorder(model)
        model.commit_networked_move((7, 1), (5, 2))
        assert model.last_notification is not None
        model.publish(model.last_notification)
        assert seen == [model.last_notification]


class TestPersistence:
    def test_load_none_resets(self) -> None:
        model = GameModel()
        model.commit_move((6, 4), (4, 4))
        seen = _recorder(model)
        model.load(None, white_to_move_if_new=False)
        assert seen == [ResetNotification(Color.BLACK)]
        assert model.side_to_move == Color.BLACK
        assert model.piece_glyph_at((6, 4)) == "♙"
        assert model.last_notification is None

    def test_load_text(self) -> None:
        model = GameModel()
        model.load("false\n0 0 K false\n7 7 K true\n")
        assert model.side_to_move == Color.BLACK
        assert model.piece_glyph_at((0, 0)) == "♚"
        assert model.piece_glyph_at((0, 4)) == ""

    def test_save_load_round_trip(self) -> None:
        model = GameModel()
        model.commit_move((6, 4), (4, 4))
        text = model.save()
        other = GameModel()
        other.load(text)
        assert other.position == model.position

    def test_strict_failure_leaves_board(self) -> None:
        model = GameModel()
        model.commit_move((6, 4), (4, 4))
        before = model.save()
        seen = _recorder(model)
        with pytest.raises(SaveFormatError):
            model.load("true\n0 0 Z true\n", strict=True)
        assert model.save() == before
        assert seen == []

    def test_strict_from_settings(self) -> None:
        model = GameModel(GameSettings(strict_load=True))
        with pytest.raises(SaveFormatError):
            model.load("true\ngarbage\n0 0 K\n")

    def test_explicit_lenient_overrides_settings(self) -> None:
        model = GameModel(GameSettings(strict_load=True))
        model.load("true\n0 0 K\n7 4 K true\n", strict=False)
        assert model.piece_glyph_at((7, 4)) == "♔"

    def test_file_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "saved.txt"
        model = GameModel()
        model.commit_move((7, 6), (5, 5))
        model.save_file(path)

        other = GameModel()
        seen = _recorder(other)
        other.load_file(path)
        assert other.position == model.position
        assert seen == [ResetNotification(Color.BLACK)]

    def test_load_missing_file(self, tmp_path: Path) -> None:
        model = GameModel()
        seen = _recorder(model)
        with pytest.raises(FileNotFoundError):
            model.load_file(tmp_path / "missing.txt")
        assert seen == []
        assert model.white_to_move

    def test_new_game_uses_settings(self) -> None:
        model = GameModel(GameSettings(white_to_move_on_new_game=False))
        assert model.side_to_move == Color.BLACK
        model.new_game()
        assert model.side_to_move == Color.BLACK
        model.new_game(white_to_move=True)
        assert model.side_to_move == Color.WHITE
