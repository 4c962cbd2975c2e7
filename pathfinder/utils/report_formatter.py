"""
Plain-text tables for CLI reports.

    formatter = TableFormatter([Column("Type", 11), Column("Score", 6, align=">")])
    formatter.add_section_header("SEARCH: data").add_table_header().add_separator()
    formatter.add_row(["domain", "0.70"])
    print(formatter.render())
"""

from dataclasses import dataclass, field
from typing import Any, List

from pathfinder.utils.text_processing import truncate_display


@dataclass(frozen=True)
class Column:
    """Fixed-width column; align is a format-spec alignment ('<', '>', '^')."""

    name: str
    width: int
    align: str = "<"

    def cell(self, value: Any) -> str:
        if isinstance(value, str):
            value = truncate_display(value, self.width)
        return f"{value:{self.align}{self.width}}"


@dataclass
class TableFormatter:
    """Accumulates report lines; every add_* method returns self for chaining."""

    columns: List[Column]
    total_width: int = 100
    lines: List[str] = field(default_factory=list)

    def add_section_header(self, title: str) -> "TableFormatter":
        rule = "=" * self.total_width
        self.lines.extend([rule, title, rule])
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(column.cell(column.name) for column in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Raises:
            ValueError: If the number of values does not match the columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(" ".join(column.cell(value) for column, value in zip(self.columns, values)))
        return self

    def add_summary(self, text: str) -> "TableFormatter":
        self.lines.append(f"\n{text}")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_score(score: float, decimal_places: int = 2) -> str:
    """
    Example:
        >>> format_score(0.8333)
        '0.83'
    """
    return f"{score:.{decimal_places}f}"
