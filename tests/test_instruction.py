"""Unit tests for wire instruction parsing."""

import pytest

from models.direction import Direction
from models.instruction import (
    Instruction,
    InstructionParseError,
    ParseError,
    UnknownDirectionError,
    parse_instruction,
    parse_instruction_list,
    parse_wires_text,
)


class TestParseInstruction:
    """Tests for parse_instruction."""

    @pytest.mark.parametrize("token, direction, steps", [
        ("U28", Direction.UP, 28),
        ("D7", Direction.DOWN, 7),
        ("L127", Direction.LEFT, 127),
        ("R1", Direction.RIGHT, 1),
    ])
    def test_valid_tokens(self, token, direction, steps):
        assert parse_instruction(token) == Instruction(direction, steps)

    def test_zero_steps_allowed(self):
        """A zero step count parses; it yields a degenerate segment later."""
        assert parse_instruction("R0").steps == 0

    @pytest.mark.parametrize("token", ["Uabc", "U", "", "U1.5", "U 3", "U-3", "U\u0663", "R\u0661\u0662"])
    def test_bad_step_count(self, token):
        with pytest.raises(InstructionParseError):
            parse_instruction(token)

    @pytest.mark.parametrize("token", ["X5", "u5", "N10"])
    def test_unknown_direction(self, token):
        with pytest.raises(UnknownDirectionError):
            parse_instruction(token)

    def test_bad_number_reported_before_bad_letter(self):
        with pytest.raises(InstructionParseError):
            parse_instruction("Xabc")

    def test_errors_share_base_class(self):
        assert issubclass(InstructionParseError, ParseError)
        assert issubclass(UnknownDirectionError, ParseError)
        assert issubclass(ParseError, ValueError)


class TestParseLists:
    """Tests for line and text level parsing."""

    def test_comma_separated_line(self):
        result = parse_instruction_list("R8,U5,L5,D3")
        assert result == [
            Instruction(Direction.RIGHT, 8),
            Instruction(Direction.UP, 5),
            Instruction(Direction.LEFT, 5),
            Instruction(Direction.DOWN, 3),
        ]

    def test_trailing_comma_ignored(self):
        assert len(parse_instruction_list("R8,U5,")) == 2

    def test_one_list_per_line(self):
        wires = parse_wires_text("R8,U5\nU7,R6,D4\n")
        assert [len(w) for w in wires] == [2, 3]

    def test_blank_lines_skipped(self):
        assert len(parse_wires_text("R1\n\nU1\n")) == 2

    def test_bad_token_aborts_whole_text(self):
        with pytest.raises(ParseError):
            parse_wires_text("R8,U5\nU7,Q6\n")
