"""Console formatting helpers. Card numbers never leave here unmasked."""

from decimal import Decimal

from legacypay.common.config import settings

MASK_PLACEHOLDER = "****"


def mask_card_number(card_number: str | None) -> str:
    """Replace all but the last four characters with asterisks."""

    if card_number is None or not card_number.strip() or len(card_number) < 4:
        return MASK_PLACEHOLDER
    return "*" * (len(card_number) - 4) + card_number[-4:]


def format_amount(amount: Decimal | float) -> str:
    """Render a major-unit amount as currency, e.g. ``$1,234.50``."""

    return f"{settings.currency_symbol}{Decimal(str(amount)):,.2f}"
