"""Rich table formatting for terminal output."""

from rich.console import Console
from rich.table import Table

from range_chart.analysis.chart import ChartCell, RangeChart
from range_chart.analysis.win_probability import HandComparison
from range_chart.models.card import Card
from range_chart.models.position import PositionTable


class TableFormatter:
    """Format chart data as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    @staticmethod
    def _cell_style(cell: ChartCell) -> str:
        pct = cell.percentage
        if pct >= 75:
            return "bold green"
        if pct >= 50:
            return "green"
        if pct >= 25:
            return "yellow"
        return "red"

    def print_chart(self, chart: RangeChart) -> None:
        """Print the 13x13 chart with cells coloured by projected percentage."""
        table = Table(title=f"Range Chart for {chart.position}", show_lines=True)
        table.add_column("", style="cyan", justify="right")
        for rank in chart.ranks:
            table.add_column(rank.value, justify="right")

        for rank, cells in zip(chart.ranks, chart.rows):
            row = [rank.value]
            for cell in cells:
                style = self._cell_style(cell)
                row.append(f"[{style}]{cell.percentage:4.1f}[/{style}]")
            table.add_row(*row)

        self.console.print(table)

    def print_comparison(self, first: Card, second: Card, comparison: HandComparison,
                         cell: ChartCell, position: str) -> None:
        """Print the breakdown for a single starting hand."""
        table = Table(title=f"{cell.hand.notation} ({first.pretty()} {second.pretty()}) from {position}")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Score", f"{comparison.score:g}")
        table.add_row("Better combos", str(comparison.better))
        table.add_row("Tied combos", str(comparison.tied))
        table.add_row("Combos scanned", str(comparison.scanned))
        table.add_row("Win probability", f"{cell.probability * 100:.1f}%")
        table.add_row("Projected", f"{cell.percentage:.1f}%")

        self.console.print(table)

    def print_positions(self, positions: PositionTable) -> None:
        table = Table(title="Positions")
        table.add_column("Position", style="cyan")
        table.add_column("Group")
        table.add_column("Opponents", justify="right")

        for position, exponent in positions.items():
            table.add_row(position.value, position.category, str(exponent))

        self.console.print(table)
