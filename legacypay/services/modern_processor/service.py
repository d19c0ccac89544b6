"""Native implementation of the modern payment contract (simulated)."""

from collections.abc import Callable
from decimal import Decimal

from legacypay.common.config import settings
from legacypay.common.display import format_amount
from legacypay.common.ids import uuid_transaction_id
from legacypay.common.logging import logger
from legacypay.common.metrics import payments_processed_total, refunds_total, status_checks_total
from legacypay.payments.contract import PaymentProcessor
from legacypay.payments.schemas import PaymentApproved, PaymentRequest, PaymentResult, PaymentStatus


class ModernPaymentProcessor(PaymentProcessor):
    """Approves every payment and refund."""

    name = "modern"

    def __init__(self, id_factory: Callable[[], str] = uuid_transaction_id) -> None:
        self.id_factory = id_factory

    def process(self, request: PaymentRequest) -> PaymentResult:
        transaction_id = self.id_factory()
        logger.info("modern processor approved id=%s amount=%s", transaction_id, format_amount(request.amount))
        payments_processed_total.labels(processor=self.name, outcome="approved").inc()
        return PaymentApproved(transaction_id=transaction_id, message=settings.modern_approval_message)

    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        logger.info("modern processor refund id=%s amount=%s", transaction_id, format_amount(amount))
        refunds_total.labels(processor=self.name, result="ok").inc()
        return True

    def check_status(self, transaction_id: str) -> PaymentStatus:
        status_checks_total.labels(processor=self.name, status=PaymentStatus.APPROVED.value).inc()
        return PaymentStatus.APPROVED
