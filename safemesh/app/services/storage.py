"""
Key-value storage slot interface.

Used for the remembered session and the console settings. Implementations
raise StorageUnavailable on any read/write failure; callers decide whether
to fail open (session) or report the failure (settings).
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageUnavailable(Exception):
    """Persistence slot could not be read or written"""

    def __init__(self, key: str, operation: str, reason: str = ""):
        self.key = key
        self.operation = operation
        super().__init__(f"Storage {operation} failed for key '{key}': {reason}")


class IKeyValueStorage(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the key; absent keys are not an error"""
        pass
