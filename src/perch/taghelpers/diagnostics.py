"""Diagnostics for tag helpers.

Helpers receive their logger at construction time. Anything with
``isEnabledFor`` and ``log`` works, so a plain ``logging.Logger`` is the
usual choice and ``NullLogger`` stands in when diagnostics are unwanted.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from perch.taghelpers.context import TagHelperContext

logger = logging.getLogger("perch.taghelpers")


@runtime_checkable
class TagHelperLogger(Protocol):
    """The slice of ``logging.Logger`` a tag helper depends on."""

    def isEnabledFor(self, level: int) -> bool: ...  # noqa: N802 — mirrors logging.Logger
    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None: ...


class NullLogger:
    """A ``TagHelperLogger`` that drops everything."""

    __slots__ = ()

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802, ARG002
        return False

    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None:  # noqa: ARG002
        return None


@dataclass(frozen=True, slots=True)
class MissingAttributeEvent:
    """Structured payload for a helper that was skipped for missing attributes."""

    helper: str
    unique_id: str
    missing_attributes: tuple[str, ...]

    def format(self) -> str:
        return (
            f"Tag helper {self.helper} had the following missing attributes: "
            f"{', '.join(self.missing_attributes)}"
        )


def missing_attributes(context: TagHelperContext, required: Iterable[str]) -> tuple[str, ...]:
    """Return the names in *required* that the element does not carry, in order."""
    return tuple(name for name in required if name not in context.all_attributes)


def all_required_attributes_are_present(
    context: TagHelperContext,
    required: Iterable[str],
    log: TagHelperLogger,
    *,
    helper: str,
) -> bool:
    """Check the element carries every attribute in *required*.

    An element carrying some but not all of them was meant for this helper
    and gets a warning naming what is missing. An element carrying none of
    them is an ordinary element and is passed over quietly.
    """
    required = tuple(required)
    missing = missing_attributes(context, required)
    if not missing:
        return True

    if len(missing) < len(required):
        event = MissingAttributeEvent(
            helper=helper,
            unique_id=context.unique_id,
            missing_attributes=missing,
        )
        log.log(
            logging.WARNING,
            "Tag helper %s had the following missing attributes: %s",
            helper,
            ", ".join(missing),
            extra={"missing_attributes": missing, "event": event},
        )
    return False
