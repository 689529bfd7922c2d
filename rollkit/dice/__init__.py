"""Dice notation interpreter.

Parses dice notation into descriptors and rolls them with a
cryptographically strong random source.

Usage:
    >>> from rollkit.dice import parse, execute
    >>> descriptor = parse("2d20kh1+5")
    >>> result = execute(descriptor)
"""

# Types
from rollkit.dice.types import (
    DiceDescriptor,
    DieOutcome,
    RollResult,
    Selection,
    SelectionMode,
)

# Parser
from rollkit.dice.parser import parse_dice, DiceParseError, MAX_DICE, MAX_SIDES

# Roller
from rollkit.dice.roller import roll_dice, roll, roll_die, secure_random_int, select_kept

# Display helpers
from rollkit.dice.formatting import format_breakdown, format_expression, format_modifier

# Presets
from rollkit.dice.presets import DEFAULT_PRESETS, DicePreset, get_preset, roll_preset

# Call-level interface used by collaborators
parse = parse_dice
execute = roll_dice

__all__ = [
    # Types
    "DiceDescriptor",
    "DieOutcome",
    "RollResult",
    "Selection",
    "SelectionMode",
    # Parser
    "parse",
    "parse_dice",
    "DiceParseError",
    "MAX_DICE",
    "MAX_SIDES",
    # Roller
    "execute",
    "roll_dice",
    "roll",
    "roll_die",
    "secure_random_int",
    "select_kept",
    # Formatting
    "format_breakdown",
    "format_expression",
    "format_modifier",
    # Presets
    "DEFAULT_PRESETS",
    "DicePreset",
    "get_preset",
    "roll_preset",
]
