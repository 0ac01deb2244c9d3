from datetime import datetime
from typing import List, Optional

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.app.repositories.alert_repository import IAlertRepository
from safemesh.domain.entities import Alert, AlertStatus, AlertType


class AlertRepository(IAlertRepository):
    """Alert repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, alert_id: str) -> Optional[Alert]:
        """Get alert by ID"""
        stmt = select(Alert).where(Alert.id == alert_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Alert]:
        """List alerts, most recent first"""
        stmt = select(Alert).order_by(Alert.timestamp.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_latest_simulated(self) -> Optional[Alert]:
        """Get the most recent simulated alert"""
        stmt = (
            select(Alert)
            .where(Alert.simulated == True)  # noqa: E712
            .order_by(Alert.timestamp.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def count_active_emergencies(self) -> int:
        """Count emergency alerts still in active status"""
        stmt = (
            select(func.count())
            .select_from(Alert)
            .where(Alert.type == AlertType.emergency, Alert.status == AlertStatus.active)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def count_since(self, since: datetime) -> int:
        """Count alerts with timestamp strictly after `since`"""
        stmt = select(func.count()).select_from(Alert).where(Alert.timestamp > since)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, alert: Alert) -> Alert:
        """Create a new alert"""
        self.session.add(alert)
        await self.session.flush()
        await self.session.refresh(alert)
        return alert

    async def update(self, alert: Alert) -> Alert:
        """Update existing alert"""
        self.session.add(alert)
        await self.session.flush()
        await self.session.refresh(alert)
        return alert
