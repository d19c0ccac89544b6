"""Errors raised at the payment contract boundary."""


class PaymentValidationError(ValueError):
    """A request field cannot be represented in the backend's shape.

    Raised before any backend call is made. Not retryable.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason
