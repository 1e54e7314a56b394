"""AutoConstruct Logging — hexagonal logging port and adapters."""

from autoconstruct.logging.port import LoggingPort
from autoconstruct.logging.structlog_adapter import StructlogAdapter, get_logger

__all__ = ["LoggingPort", "StructlogAdapter", "get_logger"]
