"""Wire shape returned by the legacy authorization switch."""

from pydantic import BaseModel


class LegacyTransactionResponse(BaseModel):
    """Fixed-shape authorization response.

    `response_code` is a free two-character string; "00" means approved.
    """

    auth_code: str
    response_code: str
    response_message: str
    transaction_ref: str
