"""Compiled glob patterns for import restrictions.

Glob dialect
------------
Patterns are compiled with ``wcmatch.glob`` using ``GLOBSTAR``, ``EXTGLOB``,
``DOTGLOB``, ``BRACE`` and ``FORCEUNIX``:

* ``*`` and ``?`` match within one path segment and never cross ``/``.
* ``**`` as a whole segment matches any number of directories.
* ``[...]`` character classes, ``{a,b}`` brace expansion.
* extglob groups ``?(..)``, ``*(..)``, ``+(..)``, ``@(..)`` and ``!(..)``.
* wildcards also match names starting with ``.``.
* Unix path semantics regardless of the host platform.

A leading ``!`` marks the pattern as negated, except for ``!(``, which is an
extglob group. Backslashes in a pattern are treated as path separators.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from wcmatch import glob

from restricted_imports.constants import EXTGLOB_OPEN, GLOB_FLAGS, NEGATION_PREFIX
from restricted_imports.errors import InvalidPatternError
from restricted_imports.models import Importee

logger = logging.getLogger(__name__)


def is_negated(raw: str) -> bool:
    return raw.startswith(NEGATION_PREFIX) and raw[1:2] != EXTGLOB_OPEN


def to_posix(value: str) -> str:
    return value.replace("\\", "/")


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    negated: bool
    matches_absolute_paths: bool
    matcher: Any

    def test(self, subject: str) -> bool:
        if os.sep != "/":
            subject = to_posix(subject)
        return bool(self.matcher.match(subject))

    def matches(self, importee: Importee) -> bool:
        if self.matches_absolute_paths:
            return importee.file_path is not None and self.test(importee.file_path)
        return self.test(importee.name)


def compile_pattern(raw: Any) -> CompiledPattern:
    if not isinstance(raw, str):
        raise InvalidPatternError(raw, "pattern must be a string")

    negated = is_negated(raw)
    pattern = raw[1:] if negated else raw
    if not pattern:
        raise InvalidPatternError(raw, "pattern is empty")

    try:
        matcher = glob.compile(to_posix(pattern), flags=GLOB_FLAGS)
    except Exception as exc:
        raise InvalidPatternError(raw, str(exc)) from exc

    compiled = CompiledPattern(
        source=raw,
        negated=negated,
        matches_absolute_paths=os.path.isabs(pattern),
        matcher=matcher,
    )
    logger.debug(
        "compiled pattern %r (negated=%s, absolute=%s)",
        raw,
        compiled.negated,
        compiled.matches_absolute_paths,
    )
    return compiled
