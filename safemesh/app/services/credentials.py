from abc import ABC, abstractmethod
from typing import Optional

from safemesh.domain.entities import Principal


class ICredentialVerifier(ABC):
    """Checks an email/password pair and resolves the principal"""

    @abstractmethod
    async def verify(self, email: str, password: str) -> Optional[Principal]:
        """Return the principal, or None if the credentials are invalid"""
        pass
