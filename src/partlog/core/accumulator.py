"""
MessageAccumulator - builds one log message and emits it on scope exit.

A call site creates one accumulator per log statement, appends fragments
to it and lets the ``with`` block end. Filtering happens once, at exit,
against the level configured at that moment:

    with MessageAccumulator(Severity.ERROR, "net", gate, sink) as msg:
        msg.append("conn ").append(conn_id).append(" failed")

Appending only builds text. The gate and the sink are touched exactly
once, when the block ends, whether it ends normally or with an exception.
"""

from types import TracebackType

from .gate import LevelGate
from .levels import Severity
from .sink import Sink, SinkErrorHandler, report_sink_failure


class MessageFinalizedError(RuntimeError):
    """Raised when a finalized accumulator is used again."""
    pass


class MessageAccumulator:
    """Single-use message builder for one (severity, partition) pair."""

    def __init__(
        self,
        severity: Severity,
        partition: str,
        gate: LevelGate,
        sink: Sink,
        on_sink_error: SinkErrorHandler | None = None,
    ) -> None:
        if not partition:
            raise ValueError("Partition name must not be empty")
        self._severity = Severity(severity)
        self._partition = partition
        self._gate = gate
        self._sink = sink
        self._on_sink_error = on_sink_error or report_sink_failure
        self._fragments: list[str] = []
        self._entered = False
        self._finalized = False

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def partition(self) -> str:
        return self._partition

    @property
    def text(self) -> str:
        """Message built so far."""
        return "".join(self._fragments)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def append(self, value: object) -> "MessageAccumulator":
        """Append the text form of ``value``. Returns ``self`` for chaining."""
        if self._finalized:
            raise MessageFinalizedError(
                f"Message for partition {self._partition!r} was already finalized"
            )
        self._fragments.append(value if isinstance(value, str) else str(value))
        return self

    def write(self, text: str) -> int:
        """File-like alias of :meth:`append`, so ``print(..., file=msg)`` works."""
        self.append(text)
        return len(text)

    def flush(self) -> None:
        # File-like no-op: emission only happens on scope exit
        pass

    def __enter__(self) -> "MessageAccumulator":
        if self._entered or self._finalized:
            raise MessageFinalizedError("MessageAccumulator is single use")
        self._entered = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._finalize()
        # Never swallow the exception of the surrounding block
        return False

    def _finalize(self) -> None:
        if self._finalized:
            return
        self._finalized = True

        if not self._gate.is_enabled(self._partition, self._severity):
            self._fragments.clear()
            return

        text = "".join(self._fragments)
        self._fragments.clear()
        try:
            self._sink.accept_message(self._partition, self._severity, text)
        except Exception as e:
            self._on_sink_error(e, self._partition, self._severity)

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return (
            f"MessageAccumulator(severity={self._severity.name}, "
            f"partition={self._partition!r}, {state})"
        )
