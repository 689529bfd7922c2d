"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rollkit.dice.formatting import format_breakdown, format_expression, format_modifier
from rollkit.dice.presets import DicePreset
from rollkit.dice.types import DiceDescriptor, RollResult


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def render_dice(result: RollResult) -> Text:
    """Build the row of dice in roll order.

    Kept dice are bold; dropped dice are dimmed and struck through.
    """
    text = Text()
    for index, outcome in enumerate(result.outcomes):
        if index:
            text.append(" ")
        style = "bold cyan" if outcome.kept else "dim strike"
        text.append(f"[{outcome.value}]", style=style)
    if result.modifier != 0:
        text.append(f" {format_modifier(result.modifier)}", style="yellow")
    return text


def display_roll_result(
    result: RollResult,
    label: str | None = None,
    show_breakdown: bool = True,
) -> None:
    """Display a roll with every die, the modifier and the total.

    Args:
        result: Roll to display.
        label: Optional caption such as "Attack".
        show_breakdown: Whether to print the kept-dice arithmetic.
    """
    title = format_expression(result.descriptor)
    if label:
        title = f"{label} - {title}"

    body = Text()
    body.append_text(render_dice(result))
    body.append("\n")
    body.append(str(result.total), style="bold green")

    breakdown = format_breakdown(result) if show_breakdown else None
    if breakdown:
        body.append(f"  ({breakdown})", style="dim")

    console.print(Panel(body, title=f"[bold]{escape(title)}[/bold]", border_style="cyan"))


def display_descriptor(descriptor: DiceDescriptor) -> None:
    """Display a parsed descriptor field by field."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Expression", format_expression(descriptor))
    table.add_row("Count", str(descriptor.count))
    table.add_row("Sides", str(descriptor.sides))
    table.add_row("Modifier", str(descriptor.modifier))
    selection = descriptor.selection
    table.add_row(
        "Selection",
        f"{selection.mode.name.lower()} {selection.count}" if selection else "-",
    )

    console.print(table)


def display_presets(presets: tuple[DicePreset, ...]) -> None:
    """Display presets as a table."""
    table = Table(title="Dice Presets", box=box.ROUNDED)
    table.add_column("Label", style="bold cyan")
    table.add_column("Expression")
    table.add_column("Description", style="dim")

    for preset in presets:
        table.add_row(preset.label, preset.expression, preset.description)

    console.print(table)
