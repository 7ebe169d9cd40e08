"""
Severity levels for partition logging.

Lower values are more verbose. The filtering rule is simply
``severity >= minimum``, so the numeric order is the filtering order.
"""

from enum import IntEnum

# Custom stdlib level below DEBUG (10)
TRACE_LEVEL = 5

_ALIASES = {
    "warning": "WARN",
    "critical": "FATAL",
}


class Severity(IntEnum):
    """Ordered log severity."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @classmethod
    def parse(cls, name: "str | Severity") -> "Severity":
        """Parse a level name such as ``"Trace"``, ``"warn"`` or ``"warning"``.

        Raises:
            ValueError: If the name is not a known severity.
        """
        if isinstance(name, Severity):
            return name
        normalized = str(name).strip().lower()
        key = _ALIASES.get(normalized, normalized.upper())
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown severity: {name!r}. "
                f"Expected one of: {', '.join(s.name.lower() for s in cls)}"
            ) from None

    @property
    def stdlib_level(self) -> int:
        """Matching level number for the stdlib ``logging`` module."""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    Severity.TRACE: TRACE_LEVEL,
    Severity.DEBUG: 10,
    Severity.INFO: 20,
    Severity.WARN: 30,
    Severity.ERROR: 40,
    Severity.FATAL: 50,
}
