"""Request/result models of the modern payment contract."""

from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PaymentStatus(str, Enum):
    """Lifecycle status reported by `PaymentProcessor.check_status`.

    `PENDING` doubles as the fallback for anything a backend reports that has
    no explicit mapping.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    REFUNDED = "REFUNDED"


class CardExpiration(BaseModel):
    """Card expiry as a month/year pair."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    year: int


class PaymentRequest(BaseModel):
    """One checkout payment. Immutable once handed to a processor."""

    model_config = ConfigDict(frozen=True)

    customer_id: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    card_number: str
    # Kept as text; backends decide what a valid CVV looks like.
    cvv: str
    expiration: CardExpiration
    description: str = "Product purchase"


class PaymentResult(BaseModel):
    """Outcome of `PaymentProcessor.process`.

    Always one of `PaymentApproved` or `PaymentDeclined`; callers branch on
    `success`. Both variants carry the backend's transaction id.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: str
    message: str


class PaymentApproved(PaymentResult):
    success: Literal[True] = True


class PaymentDeclined(PaymentResult):
    success: Literal[False] = False
