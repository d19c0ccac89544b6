"""Adapter that lets the legacy switch serve the modern payment contract."""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from legacypay.common.config import settings
from legacypay.common.logging import logger
from legacypay.common.metrics import (
    legacy_response_codes_total,
    payments_processed_total,
    refunds_total,
    status_checks_total,
    validation_failures_total,
)
from legacypay.payments.contract import PaymentProcessor
from legacypay.payments.errors import PaymentValidationError
from legacypay.payments.schemas import PaymentRequest, PaymentResult, PaymentStatus
from legacypay.services.legacy_adapter.mapping import (
    map_legacy_status,
    parse_cvv,
    response_code_label,
    to_minor_units,
    to_payment_result,
)
from legacypay.services.legacy_gateway.schemas import LegacyTransactionResponse


@runtime_checkable
class LegacySwitch(Protocol):
    """Call shape of the legacy authorization switch."""

    def authorize_transaction(
        self,
        card_num: str,
        cvv_code: int,
        exp_month: int,
        exp_year: int,
        amount_in_cents: float,
        customer_info: str,
    ) -> LegacyTransactionResponse: ...

    def reverse_transaction(self, trans_ref: str, amount_in_cents: float) -> bool: ...

    def query_transaction_status(self, trans_ref: str) -> str: ...


class LegacyPaymentAdapter(PaymentProcessor):
    """Translates each contract call into one legacy switch call and back.

    Holds no per-transaction state; every call is an independent round trip.
    """

    name = "legacy"

    def __init__(self, legacy: LegacySwitch, approval_message: str | None = None) -> None:
        self.legacy = legacy
        self.approval_message = approval_message or settings.legacy_approval_message

    def process(self, request: PaymentRequest) -> PaymentResult:
        """Authorize via the legacy switch.

        Raises `PaymentValidationError` before calling the switch when the CVV
        is not numeric.
        """

        try:
            cvv_code = parse_cvv(request.cvv)
        except PaymentValidationError as exc:
            validation_failures_total.labels(processor=self.name, field=exc.field).inc()
            logger.warning("legacy request rejected field=%s reason=%s", exc.field, exc.reason)
            raise

        response = self.legacy.authorize_transaction(
            request.card_number,
            cvv_code,
            request.expiration.month,
            request.expiration.year,
            to_minor_units(request.amount),
            request.customer_id,
        )
        legacy_response_codes_total.labels(response_code=response_code_label(response.response_code)).inc()

        result = to_payment_result(response, self.approval_message)
        outcome = "approved" if result.success else "declined"
        payments_processed_total.labels(processor=self.name, outcome=outcome).inc()
        logger.info(
            "legacy authorization %s ref=%s response_code=%s",
            outcome,
            response.transaction_ref,
            response.response_code,
        )
        return result

    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        # The reference is passed through as-is; the switch owns its validity.
        reversed_ok = self.legacy.reverse_transaction(transaction_id, to_minor_units(amount))
        refunds_total.labels(processor=self.name, result="ok" if reversed_ok else "rejected").inc()
        return reversed_ok

    def check_status(self, transaction_id: str) -> PaymentStatus:
        legacy_status = self.legacy.query_transaction_status(transaction_id)
        status = map_legacy_status(legacy_status)
        if status is PaymentStatus.PENDING:
            logger.debug("legacy status %r mapped to PENDING ref=%s", legacy_status, transaction_id)
        status_checks_total.labels(processor=self.name, status=status.value).inc()
        return status
