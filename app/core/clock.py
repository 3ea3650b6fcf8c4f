"""Injectable time source.

Services never call ``datetime.now()`` directly; they receive a :class:`Clock`
so tests can pin and advance time.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """Abstract clock interface. ``now()`` returns a timezone-aware UTC datetime."""

    @abstractmethod
    def now(self) -> datetime:
        ...


class SystemClock(Clock):
    """Production clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class DeterministicClock(Clock):
    """Test clock with controlled time."""

    def __init__(self, start: datetime | None = None):
        self._current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._current

    def advance(self, **delta: float) -> datetime:
        """Move time forward, e.g. ``clock.advance(seconds=5)``."""
        self._current = self._current + timedelta(**delta)
        return self._current

    def set(self, value: datetime) -> None:
        self._current = value


_system_clock = SystemClock()


def get_clock() -> Clock:
    """FastAPI dependency; overridden in tests."""
    return _system_clock
