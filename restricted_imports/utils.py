import json
from pathlib import Path
from typing import Any

import yaml

from restricted_imports.constants import YAML_SUFFIXES
from restricted_imports.errors import InvalidConfigFormatError, MissingConfigFileError


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_structured(path: Path) -> Any:
    """Read a JSON or YAML document, chosen by file suffix."""
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return read_yaml(path)
        return read_json(path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidConfigFormatError(path, str(exc)) from exc


def format_location(location: Any) -> str:
    if location is None:
        return "-"
    if isinstance(location, dict):
        line = location.get("line")
        column = location.get("column")
        file = location.get("file")
        parts = [str(part) for part in (file, line, column) if part is not None]
        if parts:
            return ":".join(parts)
    return str(location)
