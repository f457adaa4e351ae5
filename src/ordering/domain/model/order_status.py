"""Order status values and the policies that govern moving between them.

The lifecycle is ``CREATED -> IN_PREPARATION -> READY -> COMPLETED``,
with ``CANCELLED`` reachable from ``CREATED`` or ``IN_PREPARATION``.

Which transitions are actually accepted is decided by a
``TransitionPolicy``: a plain callable ``(current, target) -> bool``.
Application handlers take the policy as a constructor argument so a
stricter table can be swapped in without touching callers.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ordering.domain.exceptions import ValidationError


class OrderStatus(Enum):
    CREATED = "CREATED"
    IN_PREPARATION = "IN_PREPARATION"
    READY = "READY"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)

    @classmethod
    def parse(cls, raw: str | OrderStatus) -> OrderStatus:
        """Resolve a member from its name, value or label.

        Raises ValidationError for anything that is not a known status.
        """
        if isinstance(raw, OrderStatus):
            return raw
        wanted = (raw or "").strip().lower()
        for status in cls:
            if wanted in (status.value.lower(), status.label.lower()):
                return status
        raise ValidationError(f"Invalid order status: '{raw}'")


_STATUS_LABELS = {
    OrderStatus.CREATED: "Created",
    OrderStatus.IN_PREPARATION: "In preparation",
    OrderStatus.READY: "Ready",
    OrderStatus.COMPLETED: "Completed",
    OrderStatus.CANCELLED: "Cancelled",
}


TransitionPolicy = Callable[[OrderStatus, OrderStatus], bool]


def permissive_transition_policy(current: OrderStatus, target: OrderStatus) -> bool:
    """Accept any change of status; only re-asserting the current one fails."""
    return current != target


STRICT_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.CREATED: frozenset({OrderStatus.IN_PREPARATION, OrderStatus.CANCELLED}),
    OrderStatus.IN_PREPARATION: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
    OrderStatus.READY: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def strict_transition_policy(current: OrderStatus, target: OrderStatus) -> bool:
    """Forward-only lifecycle: one step at a time, cancel before READY."""
    return target in STRICT_TRANSITIONS[current]
