"""
Core of partlog: severities, level gate and message accumulation.
"""

from .accumulator import MessageAccumulator, MessageFinalizedError
from .facade import PartitionLogging
from .gate import LevelGate
from .levels import TRACE_LEVEL, Severity
from .sink import Sink, SinkErrorHandler, report_sink_failure
from .store import DEFAULT_ROOT_LEVEL, INTERNAL_LOGGER, LevelStore, PartitionLevelStore

__all__ = [
    "DEFAULT_ROOT_LEVEL",
    "INTERNAL_LOGGER",
    "LevelGate",
    "LevelStore",
    "MessageAccumulator",
    "MessageFinalizedError",
    "PartitionLevelStore",
    "PartitionLogging",
    "Severity",
    "Sink",
    "SinkErrorHandler",
    "TRACE_LEVEL",
    "report_sink_failure",
]
