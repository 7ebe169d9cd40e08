"""
PartitionLogging - entry point for call sites.

Bundles a level store and a sink so call sites only name the severity
and the partition:

    log = PartitionLogging(store, sink)

    if log.log_debug("net"):
        with log.clog(Severity.DEBUG, "net") as msg:
            msg.append("peers: ").append(expensive_dump())

    log.emit(Severity.WARN, "storage", "disk at ", 93, "%")
"""

from .accumulator import MessageAccumulator
from .gate import LevelGate
from .levels import Severity
from .sink import Sink, SinkErrorHandler
from .store import LevelStore


class PartitionLogging:
    """Creates accumulators bound to one store and one sink."""

    def __init__(
        self,
        store: LevelStore,
        sink: Sink,
        on_sink_error: SinkErrorHandler | None = None,
    ) -> None:
        self._store = store
        self._gate = LevelGate(store)
        self._sink = sink
        self._on_sink_error = on_sink_error

    @property
    def store(self) -> LevelStore:
        return self._store

    @property
    def gate(self) -> LevelGate:
        return self._gate

    @property
    def sink(self) -> Sink:
        return self._sink

    def clog(self, severity: Severity, partition: str) -> MessageAccumulator:
        """New accumulator for one log statement. Use it as a context manager."""
        return MessageAccumulator(
            severity, partition, self._gate, self._sink, self._on_sink_error
        )

    def emit(self, severity: Severity, partition: str, *fragments: object) -> None:
        """Log ``fragments`` concatenated, as a single statement."""
        with self.clog(severity, partition) as msg:
            for fragment in fragments:
                msg.append(fragment)

    def is_enabled(self, partition: str, severity: Severity) -> bool:
        return self._gate.is_enabled(partition, severity)

    def log_debug(self, partition: str) -> bool:
        return self._gate.log_debug(partition)

    def log_trace(self, partition: str) -> bool:
        return self._gate.log_trace(partition)
