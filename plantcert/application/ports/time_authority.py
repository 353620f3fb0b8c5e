"""Time Authority Protocol - interface for timestamp provisioning.

Every service that stamps records or events injects a
TimeAuthorityProtocol instead of calling datetime.now() directly, so
tests can pin time with FakeTimeAuthority.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority from plantcert.infrastructure.adapters

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone information (UTC recommended)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time as a timezone-aware datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock value in seconds.

        Use this for measuring elapsed time, not for timestamps. Only
        differences between values are meaningful.
        """
        ...
