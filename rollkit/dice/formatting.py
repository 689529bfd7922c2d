"""Display strings for dice descriptors and roll results."""

from rollkit.dice.types import DiceDescriptor, RollResult


def format_modifier(modifier: int) -> str:
    """Signed modifier ("+3", "-2"), or "" for zero."""
    if modifier == 0:
        return ""
    return f"+{modifier}" if modifier > 0 else str(modifier)


def format_expression(descriptor: DiceDescriptor) -> str:
    """Canonical notation for a descriptor.

    The count is always written out and the selector is lowercase, so
    "d20" and "D20" both come back as "1d20".

    Examples:
        >>> format_expression(DiceDescriptor(count=1, sides=20))
        '1d20'
    """
    expression = f"{descriptor.count}d{descriptor.sides}"
    if descriptor.selection is not None:
        expression += descriptor.selection.notation
    return expression + format_modifier(descriptor.modifier)


def _modifier_term(modifier: int) -> str:
    sign = "+" if modifier > 0 else "-"
    return f" {sign} {abs(modifier)}"


def format_breakdown(result: RollResult) -> str | None:
    """Arithmetic shown next to a total, or None when it adds nothing.

    With dropped dice the kept values are listed so the reader can see
    what was summed. Without dropped dice, only a multi-die roll with a
    modifier gets a breakdown, as subtotal and modifier.
    """
    if result.has_dropped:
        breakdown = " + ".join(str(v) for v in result.kept_values)
        if result.modifier != 0:
            breakdown += _modifier_term(result.modifier)
        return breakdown

    if len(result.outcomes) > 1 and result.modifier != 0:
        return f"{result.subtotal}{_modifier_term(result.modifier)}"

    return None
