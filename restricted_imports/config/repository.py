"""Load restriction options and importee feeds from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from restricted_imports.config.schema import validate_config, validate_importee_feed
from restricted_imports.constants import CONFIG_FILENAMES, RESTRICTIONS_KEY
from restricted_imports.errors import MissingConfigFileError
from restricted_imports.models import Importee, PatternOption
from restricted_imports.restrictions.restriction_set import RestrictionSet
from restricted_imports.utils import read_structured

logger = logging.getLogger(__name__)


class RestrictionsConfigRepository:
    def __init__(self, root: Optional[Path] = None, path: Optional[Path] = None) -> None:
        self._root = root or Path.cwd()
        self._explicit_path = path

    @property
    def config_path(self) -> Path:
        if self._explicit_path is not None:
            return self._explicit_path
        for filename in CONFIG_FILENAMES:
            candidate = self._root / filename
            if candidate.exists():
                return candidate
        raise MissingConfigFileError(self._root / CONFIG_FILENAMES[0])

    def load_config(self) -> dict[str, Any]:
        path = self.config_path
        payload = read_structured(path)
        if payload is None:
            payload = {}
        validate_config(payload, path)
        logger.debug("loaded restrictions config from %s", path)
        return payload

    def load_options(self) -> list[PatternOption]:
        return list(self.load_config().get(RESTRICTIONS_KEY) or [])

    def load_restrictions(self) -> RestrictionSet:
        return RestrictionSet.build(self.load_options())


def load_importees(path: Path) -> list[Importee]:
    payload = read_structured(path)
    validate_importee_feed(payload, path)
    importees = [Importee.from_dict(item) for item in payload]
    logger.debug("loaded %d importee(s) from %s", len(importees), path)
    return importees
