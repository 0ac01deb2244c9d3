from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from safemesh.domain.entities import Alert


class IAlertRepository(ABC):
    """Alert repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, alert_id: str) -> Optional[Alert]:
        """Get alert by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Alert]:
        """List alerts, most recent first"""
        pass

    @abstractmethod
    async def get_latest_simulated(self) -> Optional[Alert]:
        """Get the most recent alert created by the simulation trigger"""
        pass

    @abstractmethod
    async def count_active_emergencies(self) -> int:
        """Count emergency alerts still in active status"""
        pass

    @abstractmethod
    async def count_since(self, since: datetime) -> int:
        """Count alerts with timestamp strictly after `since`"""
        pass

    @abstractmethod
    async def create(self, alert: Alert) -> Alert:
        """Create a new alert"""
        pass

    @abstractmethod
    async def update(self, alert: Alert) -> Alert:
        """Update existing alert"""
        pass
