"""Checkout flow must run unchanged over any PaymentProcessor."""

from decimal import Decimal

import pytest

from legacypay.payments.contract import PaymentProcessor
from legacypay.payments.errors import PaymentValidationError
from legacypay.payments.schemas import CardExpiration, PaymentStatus
from legacypay.services.checkout.service import CheckoutService
from legacypay.services.legacy_adapter.service import LegacyPaymentAdapter
from legacypay.services.legacy_gateway.service import LegacyTransactionService
from legacypay.services.modern_processor.service import ModernPaymentProcessor


def _processors() -> list[PaymentProcessor]:
    return [
        ModernPaymentProcessor(id_factory=lambda: "00000000-0000-4000-8000-000000000001"),
        LegacyPaymentAdapter(LegacyTransactionService(reference_factory=lambda: "LEG123")),
    ]


@pytest.mark.parametrize("processor", _processors(), ids=lambda p: p.name)
def test_same_checkout_flow_over_both_processors(processor):
    """Identical orchestration code completes, refunds and queries on each backend."""

    checkout = CheckoutService(processor)

    result = checkout.complete_order("customer@example.com", Decimal("150.00"), "4111111111111111")

    assert result.success is True
    assert result.transaction_id
    assert checkout.refund_order(result.transaction_id, Decimal("150.00")) is True
    assert isinstance(checkout.order_status(result.transaction_id), PaymentStatus)


def test_transaction_ids_follow_each_backend_format():
    """Injected id factories make both backends deterministic."""

    modern, legacy = _processors()

    modern_result = CheckoutService(modern).complete_order("a@example.com", Decimal("10"), "4111111111111111")
    legacy_result = CheckoutService(legacy).complete_order("a@example.com", Decimal("10"), "4111111111111111")

    assert modern_result.transaction_id == "00000000-0000-4000-8000-000000000001"
    assert modern_result.message == "Payment approved"
    assert legacy_result.transaction_id == "LEG123"
    assert legacy_result.message == "Payment approved (legacy)"


def test_checkout_builds_request_from_defaults(legacy_backend):
    """Omitted card details fall back to configured checkout defaults."""

    CheckoutService(LegacyPaymentAdapter(legacy_backend)).complete_order(
        "customer2@example.com", Decimal("200.00"), "4111111111111111"
    )

    call = legacy_backend.authorize_calls[0]
    assert call["cvv_code"] == 123
    assert (call["exp_month"], call["exp_year"]) == (12, 2026)
    assert call["amount_in_cents"] == 20000.0
    assert call["customer_info"] == "customer2@example.com"


def test_checkout_passes_explicit_card_details(legacy_backend):
    """Caller-supplied CVV and expiry reach the backend."""

    CheckoutService(LegacyPaymentAdapter(legacy_backend)).complete_order(
        "c@example.com",
        Decimal("1.00"),
        "4111111111111111",
        cvv="987",
        expiration=CardExpiration(month=1, year=2030),
    )

    call = legacy_backend.authorize_calls[0]
    assert (call["cvv_code"], call["exp_month"], call["exp_year"]) == (987, 1, 2030)


def test_checkout_returns_decline_as_result(legacy_backend):
    """Declines are results, not exceptions."""

    legacy_backend.response_code = "05"
    legacy_backend.response_message = "INSUFFICIENT FUNDS"

    result = CheckoutService(LegacyPaymentAdapter(legacy_backend)).complete_order(
        "c@example.com", Decimal("150.00"), "4111111111111111"
    )

    assert result.success is False
    assert result.message == "INSUFFICIENT FUNDS"


def test_checkout_propagates_validation_error(legacy_backend):
    """A bad CVV surfaces to the checkout caller and never reaches the switch."""

    checkout = CheckoutService(LegacyPaymentAdapter(legacy_backend))

    with pytest.raises(PaymentValidationError):
        checkout.complete_order("c@example.com", Decimal("150.00"), "4111111111111111", cvv="12a")
    assert legacy_backend.authorize_calls == []


def test_modern_processor_accepts_any_cvv():
    """CVV format is a legacy constraint only."""

    result = CheckoutService(ModernPaymentProcessor()).complete_order(
        "c@example.com", Decimal("150.00"), "4111111111111111", cvv="12a"
    )

    assert result.success is True
