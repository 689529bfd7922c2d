"""Main CLI application for rolling dice."""

import json
import logging

import typer

from rollkit.cli.display import (
    display_descriptor,
    display_error,
    display_presets,
    display_roll_result,
)
from rollkit.config import get_settings
from rollkit.dice.parser import DiceParseError, parse_dice
from rollkit.dice.presets import DEFAULT_PRESETS, get_preset
from rollkit.dice.roller import roll_dice
from rollkit.dice.types import RollResult

logger = logging.getLogger(__name__)

# Create main app
app = typer.Typer(
    name="rollkit",
    help="Roll tabletop dice notation like 2d20kh1+5",
    add_completion=False,
)


def _emit(result: RollResult, label: str | None, as_json: bool) -> None:
    if as_json:
        payload = result.to_dict()
        if label:
            payload["label"] = label
        typer.echo(json.dumps(payload))
        return
    display_roll_result(result, label=label, show_breakdown=get_settings().show_breakdown)


@app.command("roll")
def roll_command(
    expression: str | None = typer.Argument(None, help="Dice notation, e.g. 4d6dl1"),
    label: str | None = typer.Option(None, "--label", "-l", help="Caption for the roll"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Roll a dice expression."""
    if expression is None:
        expression = get_settings().default_expression

    try:
        descriptor = parse_dice(expression)
    except DiceParseError as e:
        display_error(e.reason)
        raise typer.Exit(1)

    _emit(roll_dice(descriptor), label, as_json)


@app.command("parse")
def parse_command(
    expression: str = typer.Argument(..., help="Dice notation to validate"),
) -> None:
    """Validate an expression and show what it means, without rolling."""
    try:
        descriptor = parse_dice(expression)
    except DiceParseError as e:
        display_error(e.reason)
        raise typer.Exit(1)

    display_descriptor(descriptor)


@app.command("presets")
def presets_command() -> None:
    """List the built-in presets."""
    display_presets(DEFAULT_PRESETS)


@app.command("preset")
def preset_command(
    label: str = typer.Argument(..., help="Preset label, e.g. Adv"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Roll a built-in preset."""
    try:
        preset = get_preset(label)
    except KeyError:
        display_error(f"Unknown preset '{label}'. Run 'rollkit presets' to list them.")
        raise typer.Exit(1)

    _emit(roll_dice(parse_dice(preset.expression)), preset.label, as_json)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """rollkit - transparent, auditable dice rolls.

    Use 'rollkit roll 2d20kh1+5' to roll, 'rollkit presets' for shortcuts.
    """
    level = logging.DEBUG if verbose else get_settings().effective_log_level
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")


if __name__ == "__main__":
    app()
