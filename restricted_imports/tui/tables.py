from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from restricted_imports.models import Diagnostic
from restricted_imports.restrictions.restriction_set import RestrictionSet
from restricted_imports.tui.enums import PatternKind, UIStyle
from restricted_imports.utils import format_location


class DiagnosticsTable:
    @staticmethod
    def summary_block(diagnostics: list[Diagnostic], checked: int, config: str):
        counts = Counter(diagnostic.importee.name for diagnostic in diagnostics)
        chips = [f"{escape(key)}={value}" for key, value in sorted(counts.items())]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Config", escape(config))
        table.add_row("Checked", str(checked))
        table.add_row("Violations", str(len(diagnostics)))
        table.add_row("Modules", "  ".join(chips))
        return table

    @staticmethod
    def diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
        table = Table(
            Column(header="Location", overflow="ellipsis", max_width=40),
            Column(header="Rule", width=10),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for diagnostic in diagnostics:
            table.add_row(
                escape(format_location(diagnostic.location)),
                f"[{UIStyle.RED.value}]{diagnostic.message_id}[/{UIStyle.RED.value}]",
                escape(diagnostic.message),
            )
        return table


class RestrictionsTable:
    @staticmethod
    def restrictions_table(restrictions: RestrictionSet) -> Table:
        table = Table(
            Column(header="#", width=4),
            Column(header="Pattern", overflow="fold"),
            Column(header="Kind", width=6),
            Column(header="Negated", width=8),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, restriction in enumerate(restrictions, start=1):
            message = escape(restriction.message or "")
            for position, pattern in enumerate(restriction.patterns):
                kind = (
                    PatternKind.PATH if pattern.matches_absolute_paths else PatternKind.NAME
                )
                negated = (
                    f"[{UIStyle.YELLOW.value}]yes[/{UIStyle.YELLOW.value}]"
                    if pattern.negated
                    else ""
                )
                table.add_row(
                    str(index) if position == 0 else "",
                    escape(pattern.source),
                    kind.value,
                    negated,
                    message if position == 0 else "",
                )
        return table
