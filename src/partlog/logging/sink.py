"""
StructlogSink - delivers finished messages to structlog.

Each partition maps to the logger of the same name, so dotted partitions
follow the stdlib logger hierarchy configured by ``configure_logging``.
"""

import structlog

from ..core.levels import Severity
from . import levels as _levels  # noqa: F401  (registers TRACE)


class StructlogSink:
    """:class:`~partlog.core.sink.Sink` backed by ``structlog.get_logger``.

    Level filtering is done by the gate before a message gets here, so
    the sink forwards everything it receives.
    """

    def accept_message(self, partition: str, severity: Severity, text: str) -> None:
        log = structlog.get_logger(partition)
        log.log(
            severity.stdlib_level,
            text,
            partition=partition,
            severity=severity.name.lower(),
        )
