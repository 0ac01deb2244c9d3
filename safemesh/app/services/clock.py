from abc import ABC, abstractmethod
from datetime import datetime

from safemesh.domain.base import utcnow


class IClock(ABC):
    """Time source - returns naive UTC datetimes"""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(IClock):
    def now(self) -> datetime:
        return utcnow()
