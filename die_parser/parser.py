"""Parser for tabletop dice notation.

Supports standard notation: XdY, XdY+Z, XdY-Z.
Examples: 2d6, d20, 1d4+2, 4d20 - 5.

The count may be omitted (``d8`` is one die). Whitespace around any token is
ignored and the separator letter is case-insensitive. At most one modifier
clause is allowed.
"""

from __future__ import annotations

import logging
import re

from die_parser.errors import ParseError, ParseErrorKind
from die_parser.roll import MAX_COUNT, MAX_MODIFIER, MIN_MODIFIER, Roll

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"d", re.IGNORECASE)
_DIGITS_RE = re.compile(r"[0-9]+")
_SIDES_RE = re.compile(r"\s*(?P<sides>[0-9]*)(?P<rest>.*)", re.DOTALL)
_MODIFIER_RE = re.compile(r"\s*(?P<sign>[+-])\s*(?P<value>[0-9]+)\s*")


def _to_int(digits: str, limit: int, notation: str) -> int:
    # Compare lengths first so huge literals never go through int().
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(limit)) or int(significant) > limit:
        raise ParseError(ParseErrorKind.number_out_of_range, notation, digits)
    return int(significant)


def _parse_count(text: str, notation: str) -> int:
    text = text.strip()
    if not text:
        return 1
    if not _DIGITS_RE.fullmatch(text):
        raise ParseError(ParseErrorKind.invalid_dice_count, notation, text)
    count = _to_int(text, MAX_COUNT, notation)
    if count == 0:
        raise ParseError(ParseErrorKind.invalid_dice_count, notation, text)
    return count


def _parse_sides(text: str, notation: str) -> tuple[int, str]:
    """Split the text after the separator into (sides, remainder)."""
    m = _SIDES_RE.match(text)
    digits = m.group("sides")
    if not digits:
        raise ParseError(ParseErrorKind.invalid_side_count, notation, text.strip())
    sides = _to_int(digits, MAX_COUNT, notation)
    if sides == 0:
        raise ParseError(ParseErrorKind.invalid_side_count, notation, digits)
    return sides, m.group("rest")


def _parse_modifier(text: str, notation: str) -> int:
    if not text.strip():
        return 0
    m = _MODIFIER_RE.fullmatch(text)
    if not m:
        raise ParseError(ParseErrorKind.invalid_modifier, notation, text.strip())
    digits = m.group("value")
    if m.group("sign") == "-":
        return -_to_int(digits, -MIN_MODIFIER, notation)
    return _to_int(digits, MAX_MODIFIER, notation)


def parse_roll(notation: str) -> Roll:
    """Parse dice notation into a Roll.

    Args:
        notation: Dice notation string, e.g. "2d6" or "4d20 - 5".

    Returns:
        The parsed Roll. A missing count means one die; a missing modifier
        means 0.

    Raises:
        ParseError: If the notation is malformed. ``error.kind`` says which
            part of the notation was rejected.
    """
    try:
        text = notation.strip()
        if not text:
            raise ParseError(ParseErrorKind.empty, notation)

        sep = _SEPARATOR_RE.search(text)
        if not sep:
            raise ParseError(ParseErrorKind.missing_separator, notation, text)

        count = _parse_count(text[: sep.start()], notation)
        sides, rest = _parse_sides(text[sep.end() :], notation)
        modifier = _parse_modifier(rest, notation)
    except ParseError as exc:
        logger.debug("Rejected dice notation %r (%s)", notation, exc.kind.value)
        raise

    return Roll(number_of_dice=count, number_of_sides=sides, modifier=modifier)
