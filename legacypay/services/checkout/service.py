"""Checkout flow.

Written against `PaymentProcessor` only; it behaves the same whichever backend
is injected.
"""

from decimal import Decimal

from legacypay.common.config import settings
from legacypay.common.display import format_amount, mask_card_number
from legacypay.common.logging import customer_id_ctx, logger, processor_ctx
from legacypay.payments.contract import PaymentProcessor
from legacypay.payments.schemas import CardExpiration, PaymentRequest, PaymentResult, PaymentStatus


def default_expiration() -> CardExpiration:
    return CardExpiration(
        month=settings.checkout_expiration_month,
        year=settings.checkout_expiration_year,
    )


class CheckoutService:
    """Completes orders through whichever payment processor it is given."""

    def __init__(self, payment_processor: PaymentProcessor) -> None:
        self.payment_processor = payment_processor

    def complete_order(
        self,
        customer_id: str,
        amount: Decimal,
        card_number: str,
        cvv: str | None = None,
        expiration: CardExpiration | None = None,
        description: str | None = None,
    ) -> PaymentResult:
        """Build a payment request for one order and submit it.

        Declines come back as results; validation errors propagate.
        """

        request = PaymentRequest(
            customer_id=customer_id,
            amount=amount,
            card_number=card_number,
            cvv=settings.checkout_cvv if cvv is None else cvv,
            expiration=expiration or default_expiration(),
            description=description or settings.checkout_description,
        )

        processor_token = processor_ctx.set(self.payment_processor.name)
        customer_token = customer_id_ctx.set(customer_id)
        try:
            logger.info(
                "checkout started amount=%s card=%s",
                format_amount(request.amount),
                mask_card_number(request.card_number),
            )
            result = self.payment_processor.process(request)
            if result.success:
                logger.info("checkout approved transaction_id=%s", result.transaction_id)
            else:
                logger.warning(
                    "checkout declined transaction_id=%s message=%s",
                    result.transaction_id,
                    result.message,
                )
            return result
        finally:
            processor_ctx.reset(processor_token)
            customer_id_ctx.reset(customer_token)

    def refund_order(self, transaction_id: str, amount: Decimal) -> bool:
        """Refund a completed order through the same processor."""

        return self.payment_processor.refund(transaction_id, amount)

    def order_status(self, transaction_id: str) -> PaymentStatus:
        return self.payment_processor.check_status(transaction_id)
