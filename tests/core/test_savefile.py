"""Tests for the plain-text save format."""

import logging
from pathlib import Path

import pytest

from board_helpers import B, W, make_position
from gambit.core.enums import Color, PieceType
from gambit.core.position import Position
from gambit.core.savefile import (
    SaveFormatError,
    dump_game,
    parse_game,
    read_game_file,
    write_game_file,
)
from gambit.core.types import Coord


class TestDump:
    def test_initial_layout(self) -> None:
        lines = dump_game(Position.initial()).splitlines()
        assert len(lines) == 33
        assert lines[0] == "true"
        assert lines[1] == "0 0 R false"
        assert lines[2] == "0 1 Kn false"
        assert "7 4 K true" in lines
        assert lines[-1] == "7 7 R true"

    def test_black_to_move(self) -> None:
        text = dump_game(Position.initial(white_to_move=False))
        assert text.startswith("false\n")

    def test_trailing_newline(self) -> None:
        assert dump_game(make_position()).endswith("\n")

    def test_empty_board(self) -> None:
        assert dump_game(make_position(side_to_move=B)) == "false\n"


class TestParse:
    def test_round_trip_preserves_placement(self) -> None:
        pos = Position.initial(white_to_move=False)
        loaded = parse_game(dump_game(pos))
        assert loaded == pos
        assert loaded.side_to_move == Color.BLACK

    def test_round_trip_forgets_has_moved(self) -> None:
        pos = make_position((PieceType.KING, W, 7, 4), (PieceType.KING, B, 0, 4))
        pos.board.relocate(Coord(7, 4), Coord(7, 3))
        loaded = parse_game(dump_game(pos))
        king = loaded.board[Coord(7, 3)]
        assert king is not None
        assert not king.has_moved

    def test_index_rebuilt(self) -> None:
        loaded = parse_game("true\n3 3 K false\n5 5 Q true\n")
        assert loaded.board.king_square(Color.BLACK) == Coord(3, 3)
        assert [p.piece_type for p in loaded.board.pieces(Color.WHITE)] == [
            PieceType.QUEEN
        ]

    def test_turn_flag_case_insensitive(self) -> None:
        assert parse_game("FALSE\n").side_to_move == Color.BLACK
        assert parse_game("True\n").side_to_move == Color.WHITE

    def test_missing_turn_defaults_to_white(self) -> None:
        loaded = parse_game("0 0 K false\n")
        assert loaded.side_to_move == Color.WHITE

    def test_blank_lines_ignored(self) -> None:
        loaded = parse_game("\nfalse\n\n   \n0 0 K false\n")
        assert loaded.side_to_move == Color.BLACK
        assert len(loaded.board.pieces(Color.BLACK)) == 1

    def test_knight_code(self) -> None:
        loaded = parse_game("true\n7 1 Kn true\n")
        knight = loaded.board[Coord(7, 1)]
        assert knight is not None and knight.piece_type == PieceType.KNIGHT


class TestMalformedLenient:
    def test_bad_lines_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        text = "true\n0 0 K false\n1 2 3\n9 9 Q true\n4 4 X true\n7 7 K true\n"
        with caplog.at_level(logging.WARNING, logger="gambit.core.savefile"):
            loaded = parse_game(text)

        assert loaded.board.placement() == [
            (Coord(0, 0), PieceType.KING, Color.BLACK),
            (Coord(7, 7), PieceType.KING, Color.WHITE),
        ]
        skipped = [r for r in caplog.records if "Skipping save line" in r.getMessage()]
        assert len(skipped) == 3

    def test_invalid_turn_token_skipped(self) -> None:
        loaded = parse_game("maybe\n0 0 K false\n")
        assert loaded.side_to_move == Color.WHITE

    def test_non_integer_row(self) -> None:
        loaded = parse_game("true\na 0 K false\n")
        assert list(loaded.board.occupied()) == []

    def test_bad_color_flag(self) -> None:
        loaded = parse_game("true\n0 0 K black\n")
        assert list(loaded.board.occupied()) == []

    def test_duplicate_square_keeps_last(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gambit.core.savefile"):
            loaded = parse_game("true\n3 3 R true\n3 3 B false\n")
        piece = loaded.board[Coord(3, 3)]
        assert piece is not None
        assert (piece.piece_type, piece.color) == (PieceType.BISHOP, Color.BLACK)
        assert loaded.board.pieces(Color.WHITE) == []
        assert any("listed twice" in r.getMessage() for r in caplog.records)


class TestMalformedStrict:
    def test_reports_line_number(self) -> None:
        with pytest.raises(SaveFormatError) as info:
            parse_game("true\n0 0 K false\n1 2 3\n", strict=True)
        assert info.value.line_no == 3
        assert info.value.line == "1 2 3"
        assert "Line 3" in str(info.value)

    def test_unknown_code(self) -> None:
        with pytest.raises(SaveFormatError, match="Invalid piece code"):
            parse_game("true\n0 0 N false\n", strict=True)

    def test_off_board(self) -> None:
        with pytest.raises(SaveFormatError, match="off the board"):
            parse_game("true\n8 0 K false\n", strict=True)

    def test_bad_turn(self) -> None:
        with pytest.raises(SaveFormatError, match="Invalid boolean"):
            parse_game("yes\n", strict=True)

    def test_duplicate(self) -> None:
        with pytest.raises(SaveFormatError, match="listed twice"):
            parse_game("true\n3 3 R true\n3 3 B false\n", strict=True)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_game("true\n0 0\n", strict=True)

    def test_well_formed_passes(self) -> None:
        text = dump_game(Position.initial())
        assert parse_game(text, strict=True) == Position.initial()


class TestFiles:
    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "game.txt"
        pos = Position.initial(white_to_move=False)
        write_game_file(pos, path)
        assert path.read_text(encoding="utf-8") == dump_game(pos)
        assert read_game_file(path) == pos

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_game_file(tmp_path / "absent.txt")

    def test_strict_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("true\nnonsense line\n", encoding="utf-8")
        with pytest.raises(SaveFormatError):
            read_game_file(path, strict=True)
