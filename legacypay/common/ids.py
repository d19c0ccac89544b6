"""Identifier factories injected into processors.

Backends take a zero-argument callable so tests can supply fixed values.
"""

import time
from uuid import uuid4

from legacypay.common.config import settings

# 100ns ticks between 0001-01-01 and the Unix epoch.
_EPOCH_TICKS = 621_355_968_000_000_000


def current_ticks() -> int:
    """Wall-clock time as 100-nanosecond ticks since 0001-01-01."""

    return _EPOCH_TICKS + time.time_ns() // 100


def legacy_tick_reference() -> str:
    """Legacy transaction reference, e.g. ``LEG638...``."""

    return f"{settings.legacy_reference_prefix}{current_ticks()}"


def uuid_transaction_id() -> str:
    return str(uuid4())


def short_auth_code() -> str:
    """Eight upper-case hex characters, as the legacy switch issues them."""

    return str(uuid4())[:8].upper()
