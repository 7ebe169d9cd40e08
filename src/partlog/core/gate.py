"""
LevelGate - answers whether a severity is enabled for a partition.
"""

from .levels import Severity
from .store import LevelStore


class LevelGate:
    """Stateless predicate over a :class:`LevelStore`.

    The store is queried on every call, so reconfiguration takes effect
    immediately.
    """

    def __init__(self, store: LevelStore) -> None:
        self._store = store

    @property
    def store(self) -> LevelStore:
        return self._store

    def is_enabled(self, partition: str, severity: Severity) -> bool:
        minimum = self._store.current_minimum_level(partition)
        return minimum is not None and severity >= minimum

    def log_debug(self, partition: str) -> bool:
        return self.is_enabled(partition, Severity.DEBUG)

    def log_trace(self, partition: str) -> bool:
        return self.is_enabled(partition, Severity.TRACE)
