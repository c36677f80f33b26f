"""Message catalogue and diagnostic construction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

from restricted_imports.constants import MESSAGE_ID_RESTRICTED
from restricted_imports.models import Diagnostic, Importee

if TYPE_CHECKING:
    from restricted_imports.restrictions.restriction import Restriction


MESSAGES: Final[dict[str, str]] = {
    MESSAGE_ID_RESTRICTED: (
        "'{name}' module is restricted from being used.{customMessage}"
    ),
}


def render_message(message_id: str, data: Mapping[str, str]) -> str:
    return MESSAGES[message_id].format(**data)


def make_diagnostic(importee: Importee, restriction: Restriction) -> Diagnostic:
    data = {"name": importee.name, "customMessage": restriction.custom_message}
    return Diagnostic(
        location=importee.node,
        message_id=MESSAGE_ID_RESTRICTED,
        data=data,
        message=render_message(MESSAGE_ID_RESTRICTED, data),
        importee=importee,
        restriction=restriction,
    )
