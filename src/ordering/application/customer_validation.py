"""Field-level validation of incoming customer requests.

Runs before anything reaches the domain.  Like the entities, it reports
every problem at once through a notification ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ordering.domain.model.notification import NotificationLedger
from ordering.domain.validation import is_email_valid, is_national_id_valid


class CustomerType(Enum):
    CUSTOMER = "CUSTOMER"
    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class CustomerRequest:
    national_id: str | None
    email: str | None
    customer_type: str | None


def validate_customer_request(request: CustomerRequest) -> NotificationLedger:
    ledger = NotificationLedger()

    if not request.national_id or not request.national_id.strip():
        ledger.add("National ID is required", "national_id")
    elif not is_national_id_valid(request.national_id):
        ledger.add("National ID is invalid", "national_id")

    if not request.email or not request.email.strip():
        ledger.add("Email is required", "email")
    elif not is_email_valid(request.email):
        ledger.add("Email is invalid", "email")

    known_types = {t.value for t in CustomerType}
    if (request.customer_type or "").strip().upper() not in known_types:
        ledger.add(f"Unknown customer type: '{request.customer_type}'", "customer_type")

    return ledger
