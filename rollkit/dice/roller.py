"""Core dice rolling engine.

Draws every die from the operating system's CSPRNG via ``secrets`` and
applies keep/drop selectors without ever reordering the dice shown to
the caller.
"""

import logging
import secrets

from rollkit.dice.parser import parse_dice
from rollkit.dice.types import DiceDescriptor, DieOutcome, RollResult, Selection

logger = logging.getLogger(__name__)

# Width of each random word drawn for a die.
WORD_BITS = 64
_WORD_RANGE = 1 << WORD_BITS


def secure_random_int(sides: int) -> int:
    """Draw a uniformly distributed integer in [1, sides].

    Uses rejection sampling: words at or above the largest multiple of
    ``sides`` that fits in the word range are redrawn, so the modulo
    below carries no bias.

    Args:
        sides: Upper bound (inclusive), at least 1.

    Returns:
        Random integer between 1 and sides.
    """
    if sides == 1:
        return 1

    limit = _WORD_RANGE - (_WORD_RANGE % sides)
    while True:
        value = secrets.randbits(WORD_BITS)
        if value < limit:
            return value % sides + 1


def roll_die(sides: int) -> int:
    """Roll a single die with the given number of sides."""
    return secure_random_int(sides)


def draw_values(count: int, sides: int) -> tuple[int, ...]:
    """Roll ``count`` dice and return their values in roll order."""
    return tuple(roll_die(sides) for _ in range(count))


def select_kept(values: tuple[int, ...], selection: Selection | None) -> tuple[bool, ...]:
    """Decide which dice a selector keeps.

    Dice are ranked with a stable sort on value, so among equal values
    the die rolled earlier ranks first. For kh/dh that means the earlier
    of two tied dice counts as "higher"; for kl/dl it counts as "lower".

    Args:
        values: Die values in roll order.
        selection: Keep/drop selector, or None to keep every die.

    Returns:
        Kept flag for each die, aligned with ``values``.

    Examples:
        >>> from rollkit.dice.types import SelectionMode
        >>> select_kept((3, 1, 1, 6), Selection(SelectionMode.DROP_LOWEST, 1))
        (True, False, True, True)
    """
    if selection is None:
        return tuple(True for _ in values)

    # sorted() keeps equal elements in input order even with reverse=True
    ranked = sorted(
        enumerate(values),
        key=lambda pair: pair[1],
        reverse=selection.highest,
    )
    head = {index for index, _ in ranked[: selection.count]}

    if selection.is_keep:
        return tuple(i in head for i in range(len(values)))
    return tuple(i not in head for i in range(len(values)))


def roll_dice(descriptor: DiceDescriptor) -> RollResult:
    """Roll dice according to the descriptor.

    The descriptor is trusted to be valid; the parser is the only
    gatekeeper for bounds.

    Args:
        descriptor: The dice descriptor to roll.

    Returns:
        RollResult with every die in roll order and the totals.

    Examples:
        >>> result = roll_dice(DiceDescriptor(count=2, sides=6, modifier=3))
        >>> len(result.outcomes)
        2
    """
    values = draw_values(descriptor.count, descriptor.sides)
    kept = select_kept(values, descriptor.selection)

    outcomes = tuple(DieOutcome(value=v, kept=k) for v, k in zip(values, kept))
    subtotal = sum(o.value for o in outcomes if o.kept)
    total = subtotal + descriptor.modifier

    logger.debug(
        f"Rolled {descriptor.count}d{descriptor.sides}: {list(values)} "
        f"kept={[o.value for o in outcomes if o.kept]} total={total}"
    )

    return RollResult(
        descriptor=descriptor,
        outcomes=outcomes,
        subtotal=subtotal,
        modifier=descriptor.modifier,
        total=total,
    )


def roll(notation: str) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining parse_dice and roll_dice.

    Args:
        notation: Dice notation string (e.g., "2d20kh1+5").

    Returns:
        RollResult with individual dice and total.

    Raises:
        DiceParseError: If notation is invalid.
    """
    return roll_dice(parse_dice(notation))
