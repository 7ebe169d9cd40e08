"""
Process-wide default PartitionLogging.

Libraries that cannot receive a PartitionLogging by injection use the
module-level helpers, which delegate to the installed default:

    from partlog import Severity, clog, init_logging

    init_logging(load_config(Path("config.yaml")))
    with clog(Severity.INFO, "node") as msg:
        msg.append("started with ").append(n_peers).append(" peers")

Tests swap the default with set_logging() instead of touching global
logging state.
"""

import threading
from pathlib import Path

from .config.schema import AppConfig, LoggingConfig
from .core import MessageAccumulator, PartitionLevelStore, PartitionLogging, Severity
from .core.sink import SinkErrorHandler
from .core.store import INTERNAL_LOGGER
from .logging import StructlogSink, configure_logging, get_logger

logger = get_logger(INTERNAL_LOGGER)

_lock = threading.Lock()
_default: PartitionLogging | None = None


def init_logging(
    config: AppConfig | LoggingConfig,
    data_dir: Path | None = None,
    quiet: bool = False,
    json_output: bool = False,
    on_sink_error: SinkErrorHandler | None = None,
) -> PartitionLogging:
    """Configure the backend and install a new process default.

    Args:
        config: Full application config or just its ``logging`` section
        data_dir: Base directory for relative log files (default: config.data_dir)
        quiet: Disable console output
        json_output: Render console output as JSON
        on_sink_error: Error channel for failed deliveries

    Returns:
        The installed PartitionLogging
    """
    if isinstance(config, AppConfig):
        data_dir = data_dir if data_dir is not None else config.data_dir
        logging_config = config.logging
    else:
        logging_config = config

    configure_logging(logging_config, data_dir=data_dir, quiet=quiet, json_output=json_output)

    store = PartitionLevelStore.from_config(logging_config)
    installed = PartitionLogging(store, StructlogSink(), on_sink_error=on_sink_error)
    set_logging(installed)

    logger.debug(
        "logging.initialized",
        root=logging_config.root.level,
        loggers=len(logging_config.loggers),
    )
    return installed


def get_logging() -> PartitionLogging:
    """Current default, created on first use (root level INFO, structlog sink)."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = PartitionLogging(PartitionLevelStore(), StructlogSink())
    return _default


def set_logging(instance: PartitionLogging | None) -> None:
    """Replace the default. ``None`` resets it to the lazily created one."""
    global _default
    with _lock:
        _default = instance


def clog(severity: Severity, partition: str) -> MessageAccumulator:
    """Accumulator bound to the default PartitionLogging."""
    return get_logging().clog(severity, partition)


def log_debug(partition: str) -> bool:
    return get_logging().log_debug(partition)


def log_trace(partition: str) -> bool:
    return get_logging().log_trace(partition)
