"""Legacy transaction switch simulation.

Stands in for the old authorization system: primitive parameters in, fixed
response shape out. Customer info prefixed with `force-decline` is declined so
the failure path can be exercised end to end.
"""

from collections.abc import Callable

from legacypay.common.display import format_amount, mask_card_number
from legacypay.common.ids import legacy_tick_reference, short_auth_code
from legacypay.common.logging import logger
from legacypay.services.legacy_gateway.schemas import LegacyTransactionResponse

APPROVED_CODE = "00"
INSUFFICIENT_FUNDS_CODE = "05"
UNKNOWN_STATUS = "UNKNOWN"


class LegacyTransactionService:
    """Authorizes, reverses and reports on transactions by legacy reference."""

    def __init__(
        self,
        reference_factory: Callable[[], str] = legacy_tick_reference,
        auth_code_factory: Callable[[], str] = short_auth_code,
    ) -> None:
        self.reference_factory = reference_factory
        self.auth_code_factory = auth_code_factory
        # Lives as long as this simulator instance; nothing is persisted.
        self._statuses: dict[str, str] = {}

    def authorize_transaction(
        self,
        card_num: str,
        cvv_code: int,
        exp_month: int,
        exp_year: int,
        amount_in_cents: float,
        customer_info: str,
    ) -> LegacyTransactionResponse:
        """Authorize one card transaction."""

        # The switch assigns a reference before it decides.
        transaction_ref = self.reference_factory()
        logger.info(
            "legacy authorize ref=%s card=%s exp=%02d/%s amount=%s",
            transaction_ref,
            mask_card_number(card_num),
            exp_month,
            exp_year,
            format_amount(amount_in_cents / 100),
        )
        if customer_info.lower().startswith("force-decline"):
            self._statuses[transaction_ref] = "DECLINED"
            return LegacyTransactionResponse(
                auth_code="",
                response_code=INSUFFICIENT_FUNDS_CODE,
                response_message="INSUFFICIENT FUNDS",
                transaction_ref=transaction_ref,
            )

        self._statuses[transaction_ref] = "APPROVED"
        return LegacyTransactionResponse(
            auth_code=self.auth_code_factory(),
            response_code=APPROVED_CODE,
            response_message="TRANSACTION APPROVED",
            transaction_ref=transaction_ref,
        )

    def reverse_transaction(self, trans_ref: str, amount_in_cents: float) -> bool:
        """Reverse a transaction. The switch acknowledges every reversal."""

        logger.info(
            "legacy reverse ref=%s amount=%s",
            trans_ref,
            format_amount(amount_in_cents / 100),
        )
        if trans_ref in self._statuses:
            self._statuses[trans_ref] = "REFUNDED"
        return True

    def query_transaction_status(self, trans_ref: str) -> str:
        """Return APPROVED/DECLINED/REFUNDED, or UNKNOWN for foreign references."""

        logger.info("legacy status query ref=%s", trans_ref)
        return self._statuses.get(trans_ref, UNKNOWN_STATUS)
