from .context import get_log_context, log_context, reset_context, set_context
from .json_formatter import JSONFormatter
from .setup import configure_logging

__all__ = ["configure_logging", "JSONFormatter", "get_log_context", "set_context", "reset_context", "log_context"]
