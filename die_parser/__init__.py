"""Parse tabletop dice notation such as ``2d6`` or ``4d20 - 5``."""

from die_parser.errors import ParseError, ParseErrorKind, RollErrorKind, RollValidationError
from die_parser.parser import parse_roll
from die_parser.roll import Roll
from die_parser.validation import STANDARD_DIE_TYPES, check_roll, parse_valid_roll

__all__ = [
    "STANDARD_DIE_TYPES",
    "ParseError",
    "ParseErrorKind",
    "Roll",
    "RollErrorKind",
    "RollValidationError",
    "check_roll",
    "parse_roll",
    "parse_valid_roll",
]
