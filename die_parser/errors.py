"""Error types raised while parsing and validating dice notation.

Every failure is tagged with a member of a closed enum so callers can branch
on ``error.kind`` instead of matching message text.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from die_parser.roll import Roll


class ParseErrorKind(str, enum.Enum):
    """Why a notation string could not be parsed."""

    empty = "empty"
    missing_separator = "missing_separator"
    invalid_dice_count = "invalid_dice_count"
    invalid_side_count = "invalid_side_count"
    invalid_modifier = "invalid_modifier"
    number_out_of_range = "number_out_of_range"


_PARSE_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.empty: "Dice notation is empty",
    ParseErrorKind.missing_separator: "No 'd' separator in dice notation",
    ParseErrorKind.invalid_dice_count: "Invalid dice count",
    ParseErrorKind.invalid_side_count: "Invalid side count",
    ParseErrorKind.invalid_modifier: "Invalid modifier",
    ParseErrorKind.number_out_of_range: "Number out of range",
}


class ParseError(ValueError):
    """Raised when a dice notation string is malformed.

    Attributes:
        kind: The failure variant.
        notation: The full input string as given by the caller.
        fragment: The substring that caused the failure (may be empty).
    """

    def __init__(self, kind: ParseErrorKind, notation: str, fragment: str = "") -> None:
        self.kind = kind
        self.notation = notation
        self.fragment = fragment
        super().__init__(self._message())

    def _message(self) -> str:
        message = _PARSE_MESSAGES[self.kind]
        if self.fragment:
            message = f"{message}: {self.fragment!r}"
        return f"{message} (in {self.notation!r})"


class RollErrorKind(str, enum.Enum):
    """Why a parsed roll was rejected by validation."""

    die_type_invalid = "die_type_invalid"
    dice_exceed_limit = "dice_exceed_limit"


class RollValidationError(ValueError):
    """Raised when a well-formed roll breaks the configured table rules."""

    def __init__(self, kind: RollErrorKind, roll: Roll, message: str) -> None:
        self.kind = kind
        self.roll = roll
        super().__init__(message)
