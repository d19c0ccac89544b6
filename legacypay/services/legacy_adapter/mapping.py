"""Translation rules between the modern contract and the legacy switch.

Everything here is a pure function of its arguments.
"""

from decimal import Decimal

from legacypay.payments.errors import PaymentValidationError
from legacypay.payments.schemas import PaymentApproved, PaymentDeclined, PaymentResult, PaymentStatus
from legacypay.services.legacy_gateway.schemas import LegacyTransactionResponse

LEGACY_APPROVED_CODE = "00"
LEGACY_INT_MAX = 2**31 - 1

LEGACY_STATUS_MAP: dict[str, PaymentStatus] = {
    "APPROVED": PaymentStatus.APPROVED,
    "DECLINED": PaymentStatus.DECLINED,
    "REFUNDED": PaymentStatus.REFUNDED,
}


def parse_cvv(cvv: str) -> int:
    """Convert a CVV to the integer the legacy switch expects.

    Surrounding whitespace is tolerated; signs, letters and non-ASCII digits
    are not. The switch takes a signed 32-bit int, so larger values fail too.
    """

    digits = cvv.strip()
    if not digits or not digits.isascii() or not digits.isdigit():
        raise PaymentValidationError("cvv", "CVV is not valid for the legacy system (must be numeric)")
    value = int(digits)
    if value > LEGACY_INT_MAX:
        raise PaymentValidationError("cvv", "CVV is not valid for the legacy system (out of range)")
    return value


def to_minor_units(amount: Decimal) -> float:
    """Scale a major-unit amount to legacy cents.

    The legacy switch takes a float, so sub-cent noise can appear; callers
    compare to the cent.
    """

    return float(amount * 100)


def to_payment_result(response: LegacyTransactionResponse, approval_message: str) -> PaymentResult:
    """Map a legacy authorization response onto the modern result type.

    Only "00" approves. Declines keep the switch's own message; approvals use
    `approval_message`. The legacy reference is the transaction id either way.
    """

    if response.response_code == LEGACY_APPROVED_CODE:
        return PaymentApproved(transaction_id=response.transaction_ref, message=approval_message)
    return PaymentDeclined(transaction_id=response.transaction_ref, message=response.response_message)


def map_legacy_status(legacy_status: str) -> PaymentStatus:
    """Closed table lookup; anything unlisted is PENDING."""

    return LEGACY_STATUS_MAP.get(legacy_status, PaymentStatus.PENDING)


def response_code_label(response_code: str) -> str:
    """Metric label for a legacy response code.

    Two-digit codes are kept as-is; anything else collapses to "other" so the
    label set stays bounded.
    """

    if len(response_code) == 2 and response_code.isascii() and response_code.isdigit():
        return response_code
    return "other"
