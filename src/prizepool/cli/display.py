"""Display module for prize pool normalization results with rich terminal output."""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..formatters import AmountFormatter
from ..models import AggregationEntry, CurrencyGroup, Summary, group_digits


class PrizepoolDisplay:
    """Handles all display output for the prize pool normalization tool."""

    def __init__(
        self,
        formatter: AmountFormatter,
        console: Optional[Console] = None,
    ):
        """Initialize display with a Rich console.

        Args:
            formatter: Formatter used for every amount shown
            console: Optional console, e.g. one recording output in tests
        """
        self.formatter = formatter
        self.console = console or Console()
        self.display_limit = formatter.settings.display_limit

    def show_header(self) -> None:
        """Display the tool header."""
        header_text = Text("💰 PRIZE POOL NORMALIZER", style="bold blue")

        panel = Panel(
            "Currency detection, magnitude suffixes and separator disambiguation\n"
            "for free-text tournament prize pools",
            title=header_text,
            border_style="blue",
            padding=(1, 2)
        )

        self.console.print()
        self.console.print(panel)
        self.console.print()

    def show_parsed_values(self, entries: List[AggregationEntry]) -> None:
        """Display parsed raw values in a table.

        Args:
            entries: Entries built from the raw values
        """
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Raw", width=28)
        table.add_column("Currency", width=8)
        table.add_column("Units", justify="right", width=18)
        table.add_column("Display", justify="right", width=12)

        for entry in entries:
            amount = entry.amount
            table.add_row(
                entry.raw or "-",
                amount.tag.value if amount.recognized else "-",
                group_digits(amount.major_units) if amount.recognized else "-",
                self.formatter.format(amount),
            )

        self.console.print(table)
        self.console.print()

    def show_summary(self, summary: Summary, show_entries: bool = False) -> None:
        """Display aggregated statistics and the per-currency breakdown.

        Args:
            summary: Aggregated summary
            show_entries: Whether to list each group's entries
        """
        stats_text = (
            f"📁 Entries: {summary.total_entries:,}\n"
            f"✅ With prize pool: {summary.recognized_count:,}\n"
            f"❔ Unrecognized: {summary.unrecognized_count:,}\n"
            f"💱 Currencies: {summary.currencies_found}\n"
            f"🏆 Headline: {self.formatter.format_summary(summary)}"
        )

        self.console.print(Panel(
            stats_text,
            title="[bold yellow]Prize Pool Summary[/bold yellow]",
            border_style="yellow"
        ))
        self.console.print()

        if summary.is_empty:
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Currency", width=8)
        table.add_column("Count", justify="right", width=6)
        table.add_column("Total", justify="right", width=12)
        table.add_column("Average", justify="right", width=12)
        table.add_column("Max", justify="right", width=12)
        table.add_column("Min", justify="right", width=12)

        for group in summary.groups:
            table.add_row(
                group.tag.value,
                str(group.count),
                self.formatter.format_total(group.total_value, group.tag),
                self._format_average(group),
                self.formatter.format_total(group.max_value, group.tag),
                self.formatter.format_total(group.min_value, group.tag),
            )

        self.console.print(table)
        self.console.print()

        if show_entries:
            for group in summary.groups:
                self._show_group_entries(group)

    def _format_average(self, group: CurrencyGroup) -> str:
        average = group.average_value
        if average == float("inf"):
            return "-"
        return self.formatter.format_total(int(round(average)), group.tag)

    def _show_group_entries(self, group: CurrencyGroup) -> None:
        """Show the ranked entries of one currency group.

        Args:
            group: Currency group to display
        """
        self.console.print(f"[bold cyan]{group.tag.value} ({group.count}):[/bold cyan]")

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="dim", width=10)
        table.add_column("Name", width=36)
        table.add_column("Raw", width=24)
        table.add_column("Display", justify="right", width=12)

        for entry in group.entries[:self.display_limit]:
            table.add_row(
                str(entry.entry_id),
                entry.name,
                entry.raw,
                self.formatter.format(entry.amount),
            )

        self.console.print(table)

        if group.count > self.display_limit:
            self.console.print(
                f"[dim]... and {group.count - self.display_limit} more entries[/dim]"
            )

        self.console.print()

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: Error message to display
        """
        error_panel = Panel(
            f"❌ {message}",
            title="[bold red]Error[/bold red]",
            border_style="red"
        )
        self.console.print(error_panel)
