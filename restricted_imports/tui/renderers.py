from rich.console import Console
from rich.markup import escape

from restricted_imports.models import Diagnostic
from restricted_imports.restrictions.restriction_set import RestrictionSet
from restricted_imports.tui.enums import UIStyle
from restricted_imports.tui.sections import UISection
from restricted_imports.tui.tables import DiagnosticsTable, RestrictionsTable


class RestrictionsConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_check(
        self, diagnostics: list[Diagnostic], checked: int, config: str
    ) -> None:
        self.console.print(
            UISection.wrap(
                "check overview",
                DiagnosticsTable.summary_block(diagnostics, checked, config),
                style=UIStyle.BLUE.value,
            )
        )
        if diagnostics:
            self.console.print(
                UISection.wrap(
                    "restricted imports",
                    DiagnosticsTable.diagnostics_table(diagnostics),
                    style=UIStyle.RED.value,
                )
            )
        self.console.print(UISection.verdict(len(diagnostics)))

    def render_match(self, name: str, diagnostic: Diagnostic | None) -> None:
        if diagnostic is None:
            self.console.print(
                UISection.note(
                    "allowed",
                    f"'{escape(name)}' is not restricted.",
                    style=UIStyle.GREEN.value,
                )
            )
            return
        self.console.print(
            UISection.note(
                diagnostic.message_id,
                escape(diagnostic.message),
                style=UIStyle.RED.value,
            )
        )

    def render_restrictions(self, restrictions: RestrictionSet, config: str) -> None:
        if not len(restrictions):
            self.console.print(
                UISection.note(
                    "restrictions",
                    f"No restrictions configured in {escape(config)}.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "restrictions",
                RestrictionsTable.restrictions_table(restrictions),
                style=UIStyle.BLUE.value,
                subtitle=config,
            )
        )
