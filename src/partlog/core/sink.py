"""
Sink contract and the default error channel for failed deliveries.
"""

import logging
import sys
import traceback
from typing import Callable, Protocol

from .levels import Severity

# (error, partition, severity) -> None
SinkErrorHandler = Callable[[Exception, str, Severity], None]


class Sink(Protocol):
    """Destination of finished messages.

    ``accept_message`` may be called concurrently from many threads and
    may raise; failures are routed to a :data:`SinkErrorHandler`.
    """

    def accept_message(self, partition: str, severity: Severity, text: str) -> None:
        ...


def report_sink_failure(error: Exception, partition: str, severity: Severity) -> None:
    """Default error channel, modelled on ``logging.Handler.handleError``.

    Prints the failure to stderr when ``logging.raiseExceptions`` is set,
    and stays silent otherwise. Never raises.
    """
    if not logging.raiseExceptions or sys.stderr is None:
        return
    try:
        sys.stderr.write(
            f"--- Logging error ---\n"
            f"Sink failed to accept {severity.name} message for partition {partition!r}\n"
        )
        traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)
    except OSError:
        pass
