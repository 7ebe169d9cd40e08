"""
partlog - partition-aware logging facade.

Call sites build one message per statement and it is emitted when the
statement's ``with`` block ends, if the partition's level allows it.
"""

from .bootstrap import clog, get_logging, init_logging, log_debug, log_trace, set_logging
from .config import AppConfig, LoggerConfig, LoggingConfig, load_config
from .core import (
    LevelGate,
    LevelStore,
    MessageAccumulator,
    MessageFinalizedError,
    PartitionLevelStore,
    PartitionLogging,
    Severity,
    Sink,
    report_sink_failure,
)
from .logging import StructlogSink, configure_logging, rotate_logs

__version__ = "0.3.0"

__all__ = [
    "AppConfig",
    "LevelGate",
    "LevelStore",
    "LoggerConfig",
    "LoggingConfig",
    "MessageAccumulator",
    "MessageFinalizedError",
    "PartitionLevelStore",
    "PartitionLogging",
    "Severity",
    "Sink",
    "StructlogSink",
    "clog",
    "configure_logging",
    "get_logging",
    "init_logging",
    "load_config",
    "log_debug",
    "log_trace",
    "report_sink_failure",
    "rotate_logs",
    "set_logging",
]
