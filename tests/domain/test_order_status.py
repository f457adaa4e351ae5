"""Unit tests for order statuses and transition policies."""

import pytest

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.order_status import (
    OrderStatus,
    permissive_transition_policy,
    strict_transition_policy,
)


class TestParse:

    @pytest.mark.parametrize(
        "raw", ["IN_PREPARATION", "in_preparation", "In preparation", " in preparation "]
    )
    def test_accepts_value_or_label(self, raw):
        assert OrderStatus.parse(raw) is OrderStatus.IN_PREPARATION

    def test_passes_members_through(self):
        assert OrderStatus.parse(OrderStatus.READY) is OrderStatus.READY

    @pytest.mark.parametrize("raw", ["", "SHIPPED", None])
    def test_unknown_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid order status"):
            OrderStatus.parse(raw)

    def test_labels(self):
        assert [s.label for s in OrderStatus] == [
            "Created", "In preparation", "Ready", "Completed", "Cancelled",
        ]

    def test_terminal_states(self):
        assert {s for s in OrderStatus if s.is_terminal} == {
            OrderStatus.COMPLETED, OrderStatus.CANCELLED,
        }


class TestPermissivePolicy:

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_same_status_rejected(self, status):
        assert not permissive_transition_policy(status, status)

    def test_skips_allowed(self):
        assert permissive_transition_policy(OrderStatus.READY, OrderStatus.CREATED)
        assert permissive_transition_policy(OrderStatus.CREATED, OrderStatus.COMPLETED)


class TestStrictPolicy:

    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.CREATED, OrderStatus.IN_PREPARATION),
            (OrderStatus.IN_PREPARATION, OrderStatus.READY),
            (OrderStatus.READY, OrderStatus.COMPLETED),
            (OrderStatus.CREATED, OrderStatus.CANCELLED),
            (OrderStatus.IN_PREPARATION, OrderStatus.CANCELLED),
        ],
    )
    def test_lifecycle_steps_allowed(self, current, target):
        assert strict_transition_policy(current, target)

    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.READY, OrderStatus.CREATED),
            (OrderStatus.CREATED, OrderStatus.READY),
            (OrderStatus.READY, OrderStatus.CANCELLED),
            (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
            (OrderStatus.CANCELLED, OrderStatus.CREATED),
            (OrderStatus.READY, OrderStatus.READY),
        ],
    )
    def test_other_moves_rejected(self, current, target):
        assert not strict_transition_policy(current, target)
