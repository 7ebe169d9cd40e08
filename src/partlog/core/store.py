"""
Level configuration store.

Maps partitions to their minimum severity. Partitions are dotted names
(``agora.network.peer``); a partition without an explicit level inherits
from its nearest configured ancestor and finally from the root level.
A level of ``None`` switches the partition off entirely.
"""

import threading
from typing import TYPE_CHECKING, Protocol

import structlog

from .levels import Severity

if TYPE_CHECKING:
    from ..config.schema import LoggingConfig

# Library diagnostics, kept apart from partition loggers
INTERNAL_LOGGER = "partlog.internal"

logger = structlog.get_logger(INTERNAL_LOGGER)

DEFAULT_ROOT_LEVEL = Severity.INFO


class LevelStore(Protocol):
    """Source of truth for per-partition minimum levels.

    Implementations must answer for any partition string and be safe
    to read while another thread reconfigures them.
    """

    def current_minimum_level(self, partition: str) -> Severity | None:
        ...


class PartitionLevelStore:
    """Thread-safe, hierarchical :class:`LevelStore`.

    Usage:
        store = PartitionLevelStore(root_level=Severity.INFO)
        store.set_level("agora.network", Severity.TRACE)
        store.current_minimum_level("agora.network.peer")  # Severity.TRACE
        store.current_minimum_level("storage")             # Severity.INFO
    """

    def __init__(
        self,
        root_level: Severity | None = DEFAULT_ROOT_LEVEL,
        levels: dict[str, Severity | None] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._root = root_level
        self._levels: dict[str, Severity | None] = {}
        for partition, level in (levels or {}).items():
            self._levels[_check_partition(partition)] = level

    @classmethod
    def from_config(cls, config: "LoggingConfig") -> "PartitionLevelStore":
        """Build a store from the ``logging`` section of the configuration."""
        root = config.root
        return cls(
            root_level=root.severity if root.level is not None else DEFAULT_ROOT_LEVEL,
            # Loggers without a level inherit from their parent
            levels={
                name: cfg.severity
                for name, cfg in config.loggers.items()
                if cfg.level is not None
            },
        )

    @property
    def root_level(self) -> Severity | None:
        with self._lock:
            return self._root

    def set_root_level(self, level: Severity | None) -> None:
        with self._lock:
            self._root = level
        logger.debug("levels.root_changed", level=_level_name(level))

    def set_level(self, partition: str, level: Severity | None) -> None:
        """Set an explicit level for ``partition`` and its descendants."""
        partition = _check_partition(partition)
        with self._lock:
            self._levels[partition] = level
        logger.debug("levels.changed", partition=partition, level=_level_name(level))

    def clear_level(self, partition: str) -> None:
        """Drop the explicit level so ``partition`` inherits again."""
        with self._lock:
            self._levels.pop(partition, None)

    def levels(self) -> dict[str, Severity | None]:
        """Snapshot of the explicitly configured partitions."""
        with self._lock:
            return dict(self._levels)

    def current_minimum_level(self, partition: str) -> Severity | None:
        with self._lock:
            name = partition
            while name:
                if name in self._levels:
                    return self._levels[name]
                name = name.rpartition(".")[0]
            return self._root


def _check_partition(partition: str) -> str:
    if not partition:
        raise ValueError("Partition name must not be empty")
    return partition


def _level_name(level: Severity | None) -> str:
    return level.name.lower() if level is not None else "none"
