from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator

from restricted_imports.errors import InvalidConfigSchemaError


_PATTERN: Final[dict[str, Any]] = {"type": "string", "minLength": 1}

RESTRICTION_OPTION_SCHEMA: Final[dict[str, Any]] = {
    "anyOf": [
        _PATTERN,
        {
            "type": "object",
            "properties": {
                "name": {
                    "anyOf": [
                        _PATTERN,
                        {"type": "array", "items": _PATTERN, "minItems": 1},
                    ]
                },
                "message": {"type": "string"},
            },
            "required": ["name"],
            "additionalProperties": False,
        },
    ]
}

CONFIG_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "restrictions": {"type": "array", "items": RESTRICTION_OPTION_SCHEMA},
    },
    "additionalProperties": False,
}

IMPORTEE_FEED_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "filePath": {"type": ["string", "null"]},
            "file_path": {"type": ["string", "null"]},
            "node": {},
        },
        "required": ["name"],
    },
}


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_payload(payload: Any, path: Path, schema: dict[str, Any]) -> None:
    validator = Draft202012Validator(schema)
    error = next(iter(validator.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, _schema_error_message(error))


def validate_config(payload: Any, path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be an object")
    validate_payload(payload, path, CONFIG_SCHEMA)


def validate_importee_feed(payload: Any, path: Path) -> None:
    if not isinstance(payload, list):
        raise InvalidConfigSchemaError(path, "must be an array of importees")
    validate_payload(payload, path, IMPORTEE_FEED_SCHEMA)
