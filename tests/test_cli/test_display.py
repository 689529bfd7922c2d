"""Tests for CLI display functions."""

from rich.text import Text

from rollkit.cli.display import render_dice
from rollkit.dice.parser import parse_dice
from rollkit.dice.types import DieOutcome, RollResult


def make_result(notation: str, outcomes: list[tuple[int, bool]]) -> RollResult:
    descriptor = parse_dice(notation)
    dice = tuple(DieOutcome(value, kept) for value, kept in outcomes)
    subtotal = sum(d.value for d in dice if d.kept)
    return RollResult(descriptor, dice, subtotal, descriptor.modifier, subtotal + descriptor.modifier)


class TestRenderDice:
    """Tests for render_dice."""

    def test_returns_text_object(self):
        """Verify function returns Rich Text object."""
        result = make_result("1d20", [(12, True)])
        assert isinstance(render_dice(result), Text)

    def test_dice_in_roll_order(self):
        """Verify dice appear in the order rolled."""
        result = make_result("4d6dl1", [(3, True), (1, False), (5, True), (6, True)])
        assert render_dice(result).plain == "[3] [1] [5] [6]"

    def test_modifier_appended(self):
        """Verify the signed modifier follows the dice."""
        result = make_result("2d6-2", [(4, True), (5, True)])
        assert render_dice(result).plain == "[4] [5] -2"

    def test_dropped_die_is_struck_through(self):
        """Verify dropped dice get the strike style and kept dice do not."""
        result = make_result("2d20kh1", [(7, False), (18, True)])
        text = render_dice(result)
        styles = {text.plain[span.start:span.end]: str(span.style) for span in text.spans}
        assert "strike" in styles["[7]"]
        assert "strike" not in styles["[18]"]
