"""Plain text formatting for terminal output."""

from typing import List

from range_chart import config
from range_chart.analysis.chart import RangeChart


class TextFormatter:
    """Format the range chart as a bordered plain-text grid."""

    def __init__(self, cell_width: int = config.CELL_WIDTH):
        self.cell_width = cell_width

    def format_title(self, position: str) -> str:
        return f"{'Range Chart for ' + position:^{config.TITLE_WIDTH}}".rstrip()

    def format_border(self, columns: int) -> str:
        return " " * 3 + ("+" + "-" * self.cell_width) * columns + "+"

    def format_header(self, chart: RangeChart) -> str:
        return " " + "".join(f"{r.value:>{self.cell_width + 1}}" for r in chart.ranks)

    def format_chart(self, chart: RangeChart) -> str:
        """Header row, then each rank row followed by a border line."""
        border = self.format_border(len(chart.ranks))
        lines: List[str] = [self.format_header(chart), border]

        for rank, cells in zip(chart.ranks, chart.rows):
            row = f"{rank.value:>2} |"
            for cell in cells:
                row += f" {cell.percentage:4.1f} |"
            lines.append(row)
            lines.append(border)

        return "\n".join(lines)

    def format_report(self, chart: RangeChart) -> str:
        return f"{self.format_title(chart.position)}\n\n{self.format_chart(chart)}"
