"""The parsed representation of a die roll."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Dice and side counts are stored as unsigned 16-bit values, the modifier as a
# signed 32-bit value.
MAX_COUNT = 2**16 - 1
MIN_MODIFIER = -(2**31)
MAX_MODIFIER = 2**31 - 1


class Roll(BaseModel):
    """Holds information about a die roll, e.g. ``4d20-5``."""

    model_config = ConfigDict(frozen=True)

    number_of_dice: int = Field(ge=1, le=MAX_COUNT, description="How many dice are rolled.")
    number_of_sides: int = Field(ge=1, le=MAX_COUNT, description="The type of die.")
    modifier: int = Field(
        default=0,
        ge=MIN_MODIFIER,
        le=MAX_MODIFIER,
        description="Added to (or, when negative, subtracted from) the summed dice.",
    )

    @classmethod
    def new(cls, number_of_sides: int, number_of_dice: int, modifier: int = 0) -> Roll:
        """Build a roll by hand, sides first."""
        return cls(
            number_of_dice=number_of_dice,
            number_of_sides=number_of_sides,
            modifier=modifier,
        )

    @property
    def notation(self) -> str:
        """Canonical notation, e.g. ``2d6``, ``1d4+2`` or ``4d20-5``."""
        base = f"{self.number_of_dice}d{self.number_of_sides}"
        if self.modifier == 0:
            return base
        return f"{base}{self.modifier:+d}"

    def __str__(self) -> str:
        return self.notation
