"""Structured JSON logging with checkout context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from legacypay.common.config import settings


processor_ctx: ContextVar[str] = ContextVar("processor", default="")
customer_id_ctx: ContextVar[str] = ContextVar("customer_id", default="")


class ContextFilter(logging.Filter):
    """Inject service and checkout identifiers into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.processor = processor_ctx.get()
        record.customer_id = customer_id_ctx.get()
        return True


def configure_logging() -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stderr)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(processor)s %(customer_id)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("legacypay")
