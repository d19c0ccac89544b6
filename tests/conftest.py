"""Shared fixtures: a recording legacy switch and request builder."""

from decimal import Decimal

import pytest

from legacypay.payments.schemas import CardExpiration, PaymentRequest
from legacypay.services.legacy_gateway.schemas import LegacyTransactionResponse


class RecordingLegacyService:
    """Legacy switch double that returns canned answers and records every call."""

    def __init__(self) -> None:
        self.response_code = "00"
        self.response_message = "TRANSACTION APPROVED"
        self.transaction_ref = "LEG123"
        self.status = "APPROVED"
        self.reverse_result = True
        self.authorize_calls: list[dict] = []
        self.reverse_calls: list[tuple[str, float]] = []
        self.status_queries: list[str] = []

    def authorize_transaction(self, card_num, cvv_code, exp_month, exp_year, amount_in_cents, customer_info):
        self.authorize_calls.append(
            {
                "card_num": card_num,
                "cvv_code": cvv_code,
                "exp_month": exp_month,
                "exp_year": exp_year,
                "amount_in_cents": amount_in_cents,
                "customer_info": customer_info,
            }
        )
        return LegacyTransactionResponse(
            auth_code="A1B2C3D4",
            response_code=self.response_code,
            response_message=self.response_message,
            transaction_ref=self.transaction_ref,
        )

    def reverse_transaction(self, trans_ref, amount_in_cents):
        self.reverse_calls.append((trans_ref, amount_in_cents))
        return self.reverse_result

    def query_transaction_status(self, trans_ref):
        self.status_queries.append(trans_ref)
        return self.status


@pytest.fixture
def legacy_backend() -> RecordingLegacyService:
    return RecordingLegacyService()


@pytest.fixture
def make_request():
    """Build a valid request; keyword overrides replace individual fields."""

    def _make(**overrides) -> PaymentRequest:
        fields = {
            "customer_id": "customer@example.com",
            "amount": Decimal("150.00"),
            "card_number": "4111111111111111",
            "cvv": "123",
            "expiration": CardExpiration(month=12, year=2026),
            "description": "Product purchase",
        }
        fields.update(overrides)
        return PaymentRequest(**fields)

    return _make
