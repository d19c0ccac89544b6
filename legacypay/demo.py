"""Checkout demo: the same order flow against the modern processor and the
adapter-wrapped legacy switch.
"""

import argparse
from decimal import Decimal, InvalidOperation

from legacypay.common.config import settings
from legacypay.common.display import format_amount, mask_card_number
from legacypay.common.logging import configure_logging
from legacypay.common.metrics import render_metrics
from legacypay.common.startup import log_startup_config
from legacypay.payments.contract import PaymentProcessor
from legacypay.payments.errors import PaymentValidationError
from legacypay.services.checkout.service import CheckoutService
from legacypay.services.legacy_adapter.service import LegacyPaymentAdapter
from legacypay.services.legacy_gateway.service import LegacyTransactionService
from legacypay.services.modern_processor.service import ModernPaymentProcessor


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from exc
    if not amount.is_finite() or amount <= 0:
        raise argparse.ArgumentTypeError("amount must be greater than zero")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run one checkout through the modern processor and the legacy adapter."
    )
    parser.add_argument("--customer", default="customer@example.com")
    parser.add_argument("--amount", type=_amount, default=Decimal("150.00"))
    parser.add_argument("--card", default="4111111111111111")
    parser.add_argument("--cvv", default=settings.checkout_cvv)
    parser.add_argument("--decline", action="store_true", help="Force a decline on the legacy run")
    parser.add_argument("--refund", action="store_true", help="Refund approved orders and query status")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics at the end")
    return parser


def run_checkout(
    checkout: CheckoutService,
    customer: str,
    amount: Decimal,
    card: str,
    cvv: str,
    refund: bool,
) -> bool:
    """Complete one order and print the outcome. Returns the success flag."""

    print(f"Customer: {customer}")
    print(f"Card: {mask_card_number(card)}")
    print(f"Amount: {format_amount(amount)}")

    result = checkout.complete_order(customer, amount, card, cvv=cvv)
    if not result.success:
        print(f"[DECLINED] {result.message} (id: {result.transaction_id})")
        return False

    print(f"[APPROVED] {result.message} (id: {result.transaction_id})")
    if refund:
        refunded = checkout.refund_order(result.transaction_id, amount)
        print(f"Refund: {'ok' if refunded else 'rejected'}")
        print(f"Status: {checkout.order_status(result.transaction_id).value}")
    return True


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args and run the checkout against both processors."""

    args = build_parser().parse_args(argv)
    configure_logging()
    log_startup_config(settings)

    runs: list[tuple[PaymentProcessor, str]] = [
        (ModernPaymentProcessor(), args.customer),
        (
            LegacyPaymentAdapter(LegacyTransactionService()),
            f"force-decline-{args.customer}" if args.decline else args.customer,
        ),
    ]

    exit_code = 0
    for index, (processor, customer) in enumerate(runs):
        if index:
            print("-" * 60)
        print(f"=== Checkout ({processor.name}) ===")
        try:
            approved = run_checkout(
                CheckoutService(processor), customer, args.amount, args.card, args.cvv, args.refund
            )
        except PaymentValidationError as exc:
            print(f"[REJECTED] {exc.field}: {exc.reason}")
            exit_code = 2
            continue
        if not approved and exit_code == 0:
            exit_code = 1

    if args.metrics:
        print(render_metrics())
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
