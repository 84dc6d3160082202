"""Tests for table-rule validation of parsed rolls."""

import pytest

from die_parser import (
    STANDARD_DIE_TYPES,
    ParseError,
    Roll,
    RollErrorKind,
    RollValidationError,
    check_roll,
    parse_valid_roll,
)
from die_parser.config import Settings


class TestCheckRoll:
    @pytest.mark.parametrize("sides", STANDARD_DIE_TYPES)
    def test_standard_dice_pass(self, sides: int) -> None:
        roll = Roll.new(sides, 3)
        assert check_roll(roll) is roll

    def test_invalid_die_type(self) -> None:
        with pytest.raises(RollValidationError, match="Invalid die type: d5") as exc_info:
            check_roll(Roll.new(5, 4))
        assert exc_info.value.kind is RollErrorKind.die_type_invalid
        assert exc_info.value.roll == Roll.new(5, 4)

    def test_die_type_checked_before_count(self) -> None:
        with pytest.raises(RollValidationError) as exc_info:
            check_roll(Roll.new(5, 9001))
        assert exc_info.value.kind is RollErrorKind.die_type_invalid

    def test_too_many_dice(self) -> None:
        with pytest.raises(RollValidationError, match="Too many dice") as exc_info:
            check_roll(Roll.new(20, 101))
        assert exc_info.value.kind is RollErrorKind.dice_exceed_limit

    def test_limit_is_inclusive(self) -> None:
        check_roll(Roll.new(20, 100))

    def test_custom_limit(self) -> None:
        with pytest.raises(RollValidationError):
            check_roll(Roll.new(6, 4), max_dice=3)

    def test_zero_limit_disables_check(self) -> None:
        check_roll(Roll.new(6, 9001), max_dice=0)

    def test_custom_allowed_sides(self) -> None:
        check_roll(Roll.new(3, 1), allowed_sides=[3])
        with pytest.raises(RollValidationError):
            check_roll(Roll.new(6, 1), allowed_sides=[3])


class TestSettings:
    def test_defaults(self) -> None:
        fresh = Settings(_env_file=None)
        assert fresh.max_dice == 100
        assert tuple(fresh.allowed_sides) == STANDARD_DIE_TYPES

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIE_PARSER_MAX_DICE", "10")
        monkeypatch.setenv("DIE_PARSER_ALLOWED_SIDES", "[3, 6]")
        fresh = Settings(_env_file=None)
        assert fresh.max_dice == 10
        assert fresh.allowed_sides == [3, 6]

    def test_check_roll_reads_settings(self, table_settings: Settings) -> None:
        table_settings.max_dice = 2
        table_settings.allowed_sides = [7]
        check_roll(Roll.new(7, 2))
        with pytest.raises(RollValidationError):
            check_roll(Roll.new(7, 3))
        with pytest.raises(RollValidationError):
            check_roll(Roll.new(6, 1))


class TestParseValidRoll:
    def test_valid(self) -> None:
        assert parse_valid_roll("3d10 - 5") == Roll.new(10, 3, -5)

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(ParseError):
            parse_valid_roll("0d20")

    def test_validation_error(self) -> None:
        with pytest.raises(RollValidationError) as exc_info:
            parse_valid_roll("9001d20")
        assert exc_info.value.kind is RollErrorKind.dice_exceed_limit

    def test_explicit_limit(self) -> None:
        assert parse_valid_roll("150d6", max_dice=200) == Roll.new(6, 150)
