"""
TRACE logging level for the stdlib/structlog backend.

Custom level below DEBUG (10) so partitions configured at ``trace`` keep
their most verbose output when it reaches the handlers.

Hierarchy:
    trace    (5)  -> per-message protocol details
    debug    (10)
    info     (20)
    warning  (30)
    error    (40)
    critical (50) -> fatal
"""

import logging

import structlog

from ..core.levels import TRACE_LEVEL

TRACE = TRACE_LEVEL
logging.addLevelName(TRACE, "TRACE")


# structlog's stdlib BoundLogger proxies .log(TRACE, ...) to Logger.trace()
def _trace_method(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = _trace_method

# Register the level in structlog to avoid KeyError: 5
if hasattr(structlog, "stdlib"):
    try:
        structlog.stdlib.LEVEL_TO_NAME[TRACE] = "trace"
        structlog.stdlib.NAME_TO_LEVEL["trace"] = TRACE
    except (AttributeError, KeyError):
        pass

# Unconfigured structlog writes through PrintLogger, which has no trace()
if not hasattr(structlog.PrintLogger, "trace"):
    structlog.PrintLogger.trace = structlog.PrintLogger.msg
