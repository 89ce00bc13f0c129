"""Range Chart CLI — Typer-based command line interface."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from range_chart import config

app = typer.Typer(
    name="range-chart",
    help="Preflop starting-hand strength chart by table position",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Preflop starting-hand strength chart by table position."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def chart(
    pos: str = typer.Option(config.DEFAULT_POSITION, "--pos", "-p",
                            help="Position, e.g. sb,d,co,hj,lj,utg2,utg1,utg"),
    include_ties: bool = typer.Option(config.DEFAULT_INCLUDE_TIES, "--include-ties", "-t",
                                      help="Count tied hands as wins"),
    rich_table: bool = typer.Option(False, "--rich", help="Render as a coloured Rich table"),
):
    """Print the 13x13 win probability chart for a position."""
    from range_chart.analysis.chart import ChartBuilder
    from range_chart.formatters.table import TableFormatter
    from range_chart.formatters.text import TextFormatter

    result = ChartBuilder().build(pos, include_ties)
    if rich_table:
        TableFormatter(console).print_chart(result)
        return

    console.print(TextFormatter().format_report(result),
                  markup=False, highlight=False, soft_wrap=True)


@app.command()
def hand(
    notation: str = typer.Argument(..., help="Hand like AA, AKs, KQo, or cards like AsKh"),
    pos: str = typer.Option(config.DEFAULT_POSITION, "--pos", "-p",
                            help="Position, e.g. sb,d,co,hj,lj,utg2,utg1,utg"),
    include_ties: bool = typer.Option(config.DEFAULT_INCLUDE_TIES, "--include-ties", "-t",
                                      help="Count tied hands as wins"),
):
    """Show the score and win probability of a single starting hand."""
    from range_chart.analysis.chart import ChartBuilder, ChartCell
    from range_chart.analysis.projection import project
    from range_chart.formatters.table import TableFormatter
    from range_chart.models.card import Card
    from range_chart.models.hand import StartingHand

    try:
        if len(notation.strip()) == 4:
            first = Card.parse(notation.strip()[:2])
            second = Card.parse(notation.strip()[2:])
            if first == second:
                raise ValueError(f"Duplicate card: {first}")
            starting = StartingHand.from_cards(first, second)
        else:
            starting = StartingHand.parse(notation)
            first, second = starting.representative_cards()
    except ValueError as e:
        console.print(f"[red]Invalid hand:[/red] {e}")
        raise typer.Exit(1)

    builder = ChartBuilder()
    comparison = builder.estimator.compare(first, second)
    probability = comparison.win_probability(include_ties)
    cell = ChartCell(hand=starting, probability=probability,
                     projected=project(probability, pos, builder.positions))

    TableFormatter(console).print_comparison(first, second, comparison, cell, pos)


@app.command()
def positions():
    """List positions and the number of opponents each one projects against."""
    from range_chart.formatters.table import TableFormatter
    from range_chart.models.position import DEFAULT_POSITIONS

    TableFormatter(console).print_positions(DEFAULT_POSITIONS)


if __name__ == "__main__":
    app()
