"""Data models shared by the matching core and its callers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from restricted_imports.errors import InvalidRestrictionError

if TYPE_CHECKING:
    from restricted_imports.restrictions.restriction import Restriction


# A bare pattern string or ``{"name": str | list[str], "message": str}``.
PatternOption = Union[str, Mapping[str, Any]]


@dataclass(frozen=True)
class Importee:
    name: str
    file_path: Optional[str] = None
    node: Any = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Importee":
        file_path = payload.get("filePath", payload.get("file_path"))
        return cls(
            name=str(payload["name"]),
            file_path=str(file_path) if file_path is not None else None,
            node=payload.get("node"),
        )


@dataclass(frozen=True)
class RestrictionDefinition:
    """Uniform form of one configured restriction."""

    names: tuple[str, ...]
    message: Optional[str] = None

    @classmethod
    def from_option(cls, option: PatternOption) -> "RestrictionDefinition":
        if isinstance(option, str):
            return cls(names=(option,))
        if not isinstance(option, Mapping):
            raise InvalidRestrictionError(
                f"expected a string or an object, got {type(option).__name__}"
            )
        if "name" not in option:
            raise InvalidRestrictionError("missing 'name'")

        name = option["name"]
        names = tuple(name) if isinstance(name, (list, tuple)) else (name,)
        message = option.get("message")
        if message is not None and not isinstance(message, str):
            raise InvalidRestrictionError("'message' must be a string")
        return cls(names=names, message=message or None)


@dataclass(frozen=True)
class Diagnostic:
    location: Any
    message_id: str
    data: dict[str, str]
    message: str
    importee: Importee
    restriction: "Restriction"

    def as_dict(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "messageId": self.message_id,
            "data": dict(self.data),
            "message": self.message,
        }
