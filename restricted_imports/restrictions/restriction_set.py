"""Ordered list of restrictions, resolved first-match-wins."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from restricted_imports.messages import make_diagnostic
from restricted_imports.models import Diagnostic, Importee, PatternOption
from restricted_imports.restrictions.restriction import Restriction, create_restriction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestrictionSet:
    restrictions: tuple[Restriction, ...] = ()

    @classmethod
    def build(cls, options: Optional[Sequence[PatternOption]]) -> "RestrictionSet":
        restrictions = tuple(create_restriction(option) for option in options or [])
        logger.debug("built restriction set with %d restriction(s)", len(restrictions))
        return cls(restrictions=restrictions)

    def __len__(self) -> int:
        return len(self.restrictions)

    def __iter__(self):
        return iter(self.restrictions)

    def find_violation(self, importee: Importee) -> Optional[Restriction]:
        """Return the earliest declared restriction matching ``importee``."""
        for restriction in self.restrictions:
            if restriction.matches(importee):
                logger.debug(
                    "%r matched restriction %s", importee.name, list(restriction.names)
                )
                return restriction
        return None

    def check(self, importees: Iterable[Importee]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for importee in importees:
            restriction = self.find_violation(importee)
            if restriction is not None:
                diagnostics.append(make_diagnostic(importee, restriction))
        return diagnostics
