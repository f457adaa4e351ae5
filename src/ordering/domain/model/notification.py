"""Notification ledger shared by every self-validating entity.

Entities never raise on the first broken rule.  Each rule that fails
appends one Notification; the caller decides what to do by looking at
``is_valid`` and ``notifications``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Notification:
    message: str
    key: str = ""  # offending field, informational only

    def __str__(self) -> str:
        return self.message


class NotificationLedger:
    """Ordered record of validation failures.

    Duplicates are kept: two rules failing the same way produce two
    entries.
    """

    def __init__(self) -> None:
        self._entries: list[Notification] = []

    def add(self, message: str, key: str = "") -> None:
        self._entries.append(Notification(message, key))

    def extend(self, other: NotificationLedger) -> None:
        self._entries.extend(other)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self._entries]

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"NotificationLedger({self.messages!r})"


@runtime_checkable
class Validatable(Protocol):
    """Anything that can check itself and report into a ledger."""

    notifications: NotificationLedger

    def validate(self) -> None:
        """Clear the ledger and re-run every rule."""

    @property
    def is_valid(self) -> bool:
        """True iff the ledger is empty."""
