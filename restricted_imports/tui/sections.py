from typing import Optional

from rich.panel import Panel

from restricted_imports.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(
        title: str,
        body,
        style: str = UIStyle.BLUE.value,
        subtitle: Optional[str] = None,
    ) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def verdict(violations: int) -> Panel:
        if violations:
            noun = "violation" if violations == 1 else "violations"
            return UISection.note(
                "result", f"{violations} restricted {noun} found.", UIStyle.RED.value
            )
        return UISection.note("result", "No restricted imports.", UIStyle.GREEN.value)
