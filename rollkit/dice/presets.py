"""Named presets for common rolls."""

from dataclasses import dataclass

from rollkit.dice.roller import roll
from rollkit.dice.types import RollResult


@dataclass(frozen=True)
class DicePreset:
    """A named dice expression.

    Attributes:
        label: Short name, matched case-insensitively.
        expression: Dice notation rolled for this preset.
        description: One-line explanation for listings.
    """

    label: str
    expression: str
    description: str = ""


DEFAULT_PRESETS: tuple[DicePreset, ...] = (
    DicePreset("d20", "1d20", "Standard d20 roll"),
    DicePreset("d12", "1d12", "Roll a d12"),
    DicePreset("d10", "1d10", "Roll a d10"),
    DicePreset("d8", "1d8", "Roll a d8"),
    DicePreset("d6", "1d6", "Roll a d6"),
    DicePreset("d4", "1d4", "Roll a d4"),
    DicePreset("Adv", "2d20kh1", "Roll with advantage (2d20 keep highest)"),
    DicePreset("Dis", "2d20kl1", "Roll with disadvantage (2d20 keep lowest)"),
    DicePreset("Stat", "4d6dl1", "Ability score (4d6 drop lowest)"),
)


def get_preset(label: str) -> DicePreset:
    """Look up a default preset by label.

    Raises:
        KeyError: If no preset has that label.
    """
    wanted = label.strip().lower()
    for preset in DEFAULT_PRESETS:
        if preset.label.lower() == wanted:
            return preset
    raise KeyError(f"Unknown preset: {label!r}")


def roll_preset(label: str) -> RollResult:
    """Roll the preset with the given label."""
    return roll(get_preset(label).expression)
