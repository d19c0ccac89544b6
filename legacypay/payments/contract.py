"""Modern payment contract (abstract interface).

Checkout code depends on this interface only, so a native processor and the
adapter-wrapped legacy system can be swapped without touching callers.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from legacypay.payments.schemas import PaymentRequest, PaymentResult, PaymentStatus


class PaymentProcessor(ABC):
    """Capability set every payment backend must provide."""

    #: Label used in logs and metrics.
    name: str = "processor"

    @abstractmethod
    def process(self, request: PaymentRequest) -> PaymentResult:
        """Authorize one payment and return its outcome."""
        ...

    @abstractmethod
    def refund(self, transaction_id: str, amount: Decimal) -> bool:
        """Refund (part of) a previous payment."""
        ...

    @abstractmethod
    def check_status(self, transaction_id: str) -> PaymentStatus:
        """Report the current status of a previous payment."""
        ...
