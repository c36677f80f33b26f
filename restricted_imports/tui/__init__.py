from restricted_imports.tui.renderers import RestrictionsConsoleUI

__all__ = ["RestrictionsConsoleUI"]
