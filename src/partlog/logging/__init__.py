"""
Logging backend - structlog/stdlib outputs and the structlog sink.
"""

from .levels import TRACE
from .setup import configure_logging, get_logger, installed_files, rotate_logs
from .sink import StructlogSink

__all__ = [
    "configure_logging",
    "get_logger",
    "installed_files",
    "rotate_logs",
    "StructlogSink",
    "TRACE",
]
