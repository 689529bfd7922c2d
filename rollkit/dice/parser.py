"""Dice notation parser.

Parses dice notation like 1d20, 2d6+3, d100, 2d20kh1 and 4d6dl1+2.
The grammar has no nesting, so a single anchored regular expression
covers it; there is no tokenizer.
"""

import logging
import re

from rollkit.dice.types import DiceDescriptor, Selection, SelectionMode

logger = logging.getLogger(__name__)

MAX_DICE = 100
MAX_SIDES = 1000

# Significant digits accepted in any number. Longer runs are past every
# bound and are rejected without converting them to int.
MAX_DIGITS = 12

EXPECTED_FORMATS = "NdS, NdS+M, NdSkhK or NdSdlK (e.g., 1d20, 2d6+3, 2d20kh1, 4d6dl1)"


class DiceParseError(ValueError):
    """Error parsing dice notation.

    Attributes:
        expression: The input exactly as it was given.
        reason: Human-readable explanation, also used as the message.
    """

    def __init__(self, reason: str, expression: object) -> None:
        super().__init__(reason)
        self.reason = reason
        self.expression = expression


# Pattern: optional count, 'd', sides, optional selector, optional modifier
# Examples: 1d20, d20, 2d6+3, 2d20kh1, 4d6dl1, 3d8kl2-1
# re.ASCII keeps \d to 0-9.
DICE_PATTERN = re.compile(
    r"^(\d*)d(\d+)(?:(kh|kl|dh|dl)(\d+))?(?:([+-])(\d+))?$",
    re.IGNORECASE | re.ASCII,
)


def _fail(reason: str, expression: object) -> DiceParseError:
    logger.debug(f"Rejected dice expression {expression!r:.80}: {reason}")
    return DiceParseError(reason, expression)


def _to_int(digits: str) -> int | None:
    """Convert a digit run, or None if it has more than MAX_DIGITS significant digits."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DIGITS:
        return None
    return int(significant)


def _shown(digits: str) -> str:
    """Digit run as it should appear in a message."""
    significant = digits.lstrip("0") or "0"
    if len(significant) <= 20:
        return significant
    return f"{significant[:8]}... ({len(significant)} digits)"


def parse_dice(expression: str) -> DiceDescriptor:
    """Parse dice notation into a DiceDescriptor.

    Checks run in a fixed order and the first failure is reported:
    empty input, grammar, dice count, sides, the selector bound, then
    the modifier length.

    Args:
        expression: Dice notation string (e.g., "2d6+3", "d20", "4d6dl1").

    Returns:
        DiceDescriptor satisfying every bound.

    Raises:
        DiceParseError: If the notation is empty, malformed or out of range.

    Examples:
        >>> parse_dice("1d20")
        DiceDescriptor(count=1, sides=20, modifier=0, selection=None)
        >>> parse_dice("2d6+3")
        DiceDescriptor(count=2, sides=6, modifier=3, selection=None)
    """
    if not isinstance(expression, str):
        raise _fail("Expression must be a non-empty string", expression)
    if not expression.strip():
        raise _fail("Expression cannot be empty", expression)

    trimmed = expression.strip()
    match = DICE_PATTERN.match(trimmed)
    if not match:
        raise _fail(
            f'Invalid dice expression: "{trimmed}". Expected format: {EXPECTED_FORMATS}',
            expression,
        )

    count_str, sides_str, selector_str, selector_count_str, sign, modifier_str = match.groups()

    # "d20" means "1d20"
    count = _to_int(count_str) if count_str else 1
    if count is not None and count < 1:
        raise _fail(f"Invalid dice count: {count}. Must be at least 1", expression)
    if count is None or count > MAX_DICE:
        raise _fail(
            f"Invalid dice count: {_shown(count_str)}. Maximum is {MAX_DICE} dice",
            expression,
        )

    sides = _to_int(sides_str)
    if sides is not None and sides < 1:
        raise _fail(f"Invalid number of sides: {sides}. Must be at least 1", expression)
    if sides is None or sides > MAX_SIDES:
        raise _fail(
            f"Invalid number of sides: {_shown(sides_str)}. Maximum is {MAX_SIDES}",
            expression,
        )

    selection = None
    if selector_str:
        mode = SelectionMode(selector_str.lower())
        n = _to_int(selector_count_str)
        shown_n = _shown(selector_count_str)
        if mode in (SelectionMode.KEEP_HIGHEST, SelectionMode.KEEP_LOWEST):
            if n is not None and n < 1:
                raise _fail(f"Invalid keep count: {n}. Must be at least 1", expression)
            if n is None or n > count:
                raise _fail(
                    f"Invalid keep count: {shown_n}. "
                    f"Cannot keep more dice than rolled ({count})",
                    expression,
                )
        else:
            if n is not None and n < 1:
                raise _fail(f"Invalid drop count: {n}. Must be at least 1", expression)
            if n is None or n >= count:
                raise _fail(
                    f"Invalid drop count: {shown_n}. "
                    f"Cannot drop all or more dice than rolled ({count})",
                    expression,
                )
        selection = Selection(mode=mode, count=n)

    modifier = 0
    if modifier_str:
        magnitude = _to_int(modifier_str)
        if magnitude is None:
            raise _fail(
                f"Invalid modifier: {sign}{_shown(modifier_str)}. "
                f"Maximum is {MAX_DIGITS} digits",
                expression,
            )
        modifier = -magnitude if sign == "-" else magnitude

    return DiceDescriptor(
        count=count, sides=sides, modifier=modifier, selection=selection
    )
