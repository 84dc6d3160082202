"""Table-rule checks applied on top of parsing.

Parsing accepts any positive dice and side counts. These checks narrow that
to the dice a table actually uses: a standard die type and a cap on how many
dice go into a single roll.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from die_parser.config import STANDARD_DIE_TYPES, settings
from die_parser.errors import RollErrorKind, RollValidationError
from die_parser.parser import parse_roll
from die_parser.roll import Roll

__all__ = ["STANDARD_DIE_TYPES", "check_roll", "parse_valid_roll"]

logger = logging.getLogger(__name__)


def check_roll(
    roll: Roll,
    max_dice: int | None = None,
    allowed_sides: Iterable[int] | None = None,
) -> Roll:
    """Check that a roll uses an allowed die type and stays within the dice limit.

    Args:
        roll: A parsed roll.
        max_dice: Most dice allowed in one roll; 0 means no limit. Defaults to
            ``settings.max_dice``.
        allowed_sides: Accepted side counts. Defaults to ``settings.allowed_sides``.

    Returns:
        The same roll, unchanged.

    Raises:
        RollValidationError: If the die type is not allowed or there are too
            many dice.
    """
    if max_dice is None:
        max_dice = settings.max_dice
    sides = set(settings.allowed_sides if allowed_sides is None else allowed_sides)

    if roll.number_of_sides not in sides:
        logger.debug("Rejected roll %s: d%d not allowed", roll, roll.number_of_sides)
        raise RollValidationError(
            RollErrorKind.die_type_invalid,
            roll,
            f"Invalid die type: d{roll.number_of_sides}",
        )
    if max_dice > 0 and roll.number_of_dice > max_dice:
        logger.debug("Rejected roll %s: more than %d dice", roll, max_dice)
        raise RollValidationError(
            RollErrorKind.dice_exceed_limit,
            roll,
            f"Too many dice: {roll.number_of_dice} (max {max_dice})",
        )
    return roll


def parse_valid_roll(notation: str, max_dice: int | None = None) -> Roll:
    """Parse notation and apply check_roll to the result.

    Raises:
        ParseError: If the notation is malformed.
        RollValidationError: If the roll breaks the table rules.
    """
    return check_roll(parse_roll(notation), max_dice=max_dice)
