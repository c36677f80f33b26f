"""Match importees against configured import restrictions."""

from restricted_imports.messages import MESSAGES, make_diagnostic, render_message
from restricted_imports.models import Diagnostic, Importee, RestrictionDefinition
from restricted_imports.reporting import (
    CollectingReportSink,
    LoggingReportSink,
    ReportSink,
    check_for_restriction,
)
from restricted_imports.restrictions import (
    CompiledPattern,
    Restriction,
    RestrictionSet,
    compile_pattern,
    fold_restriction,
)

__version__ = "0.1.0"

__all__ = [
    "MESSAGES",
    "CollectingReportSink",
    "CompiledPattern",
    "Diagnostic",
    "Importee",
    "LoggingReportSink",
    "ReportSink",
    "Restriction",
    "RestrictionDefinition",
    "RestrictionSet",
    "check_for_restriction",
    "compile_pattern",
    "fold_restriction",
    "make_diagnostic",
    "render_message",
]
