"""Report sinks receiving diagnostics for restricted importees."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Optional

from restricted_imports.models import Diagnostic, Importee, PatternOption
from restricted_imports.restrictions.restriction_set import RestrictionSet

logger = logging.getLogger(__name__)


class ReportSink(ABC):
    @abstractmethod
    def report(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic for a restricted importee."""


class CollectingReportSink(ReportSink):
    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


class LoggingReportSink(ReportSink):
    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger

    def report(self, diagnostic: Diagnostic) -> None:
        self.log.warning("%s: %s", diagnostic.location, diagnostic.message)


def report_violations(
    restrictions: RestrictionSet, importees: Iterable[Importee], sink: ReportSink
) -> int:
    diagnostics = restrictions.check(importees)
    for diagnostic in diagnostics:
        sink.report(diagnostic)
    return len(diagnostics)


def check_for_restriction(
    options: Optional[Sequence[PatternOption]],
    importees: Iterable[Importee],
    sink: ReportSink,
) -> int:
    """Build restrictions from ``options`` and report every restricted importee.

    Returns the number of diagnostics handed to ``sink``.
    """
    return report_violations(RestrictionSet.build(options), importees, sink)
