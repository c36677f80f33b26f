"""Restrictions built from one or more compiled patterns."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from restricted_imports.models import Importee, PatternOption, RestrictionDefinition
from restricted_imports.restrictions.patterns import CompiledPattern, compile_pattern

logger = logging.getLogger(__name__)


def fold_restriction(patterns: Iterable[CompiledPattern], importee: Importee) -> bool:
    """Combine pattern results left to right, starting from ``False``.

    Positive patterns are OR-ed into the accumulator. Negated patterns are
    AND-NOT-ed, so they only cancel a match accumulated by earlier patterns:
    ``["a", "!a"]`` never matches ``a`` while ``["!a", "a"]`` does.
    """
    matched = False
    for pattern in patterns:
        if pattern.negated:
            matched = matched and not pattern.matches(importee)
        else:
            matched = matched or pattern.matches(importee)
    return matched


@dataclass(frozen=True)
class Restriction:
    patterns: tuple[CompiledPattern, ...]
    message: Optional[str] = None

    @property
    def custom_message(self) -> str:
        return f" {self.message}" if self.message else ""

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(pattern.source for pattern in self.patterns)

    def matches(self, importee: Importee) -> bool:
        return fold_restriction(self.patterns, importee)

    @classmethod
    def from_definition(cls, definition: RestrictionDefinition) -> "Restriction":
        patterns = tuple(compile_pattern(name) for name in definition.names)
        return cls(patterns=patterns, message=definition.message)


def create_restriction(
    option: Union[PatternOption, RestrictionDefinition],
) -> Restriction:
    if isinstance(option, RestrictionDefinition):
        definition = option
    else:
        definition = RestrictionDefinition.from_option(option)
    restriction = Restriction.from_definition(definition)
    logger.debug("created restriction %s", list(restriction.names))
    return restriction
