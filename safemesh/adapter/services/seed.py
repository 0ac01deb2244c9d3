"""
Demo data seeding

Populates an empty database with the console's demo users, alerts and
evidence. Does nothing when users already exist.
"""

import logging
from datetime import datetime
from typing import Callable

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.domain.entities import (
    Alert,
    AlertSeverity,
    AlertStatus,
    AlertType,
    Evidence,
    User,
    UserRole,
    UserStatus,
)

logger = logging.getLogger(__name__)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value)


def demo_users():
    return [
        User(id="1", name="Alice Johnson", email="alice@example.com", role=UserRole.tourist,
             status=UserStatus.active, last_seen=_ts("2024-01-15T10:30:00"), device_id="DEV001"),
        User(id="2", name="Bob Smith", email="bob@example.com", role=UserRole.guide,
             status=UserStatus.active, last_seen=_ts("2024-01-15T11:15:00"), device_id="DEV002"),
        User(id="3", name="Carol Brown", email="carol@example.com", role=UserRole.tourist,
             status=UserStatus.suspended, last_seen=_ts("2024-01-14T16:45:00"), device_id="DEV003"),
    ]


def demo_alerts():
    return [
        Alert(
            id="1",
            type=AlertType.emergency,
            title="SOS Signal Detected",
            description="Emergency signal from device DEV001 in sector A-7",
            timestamp=_ts("2024-01-15T12:00:00"),
            status=AlertStatus.active,
            severity=AlertSeverity.critical,
            location="Sector A-7",
        ),
        Alert(
            id="2",
            type=AlertType.warning,
            title="Low Battery Warning",
            description="Multiple devices reporting low battery levels",
            timestamp=_ts("2024-01-15T11:30:00"),
            status=AlertStatus.acknowledged,
            severity=AlertSeverity.medium,
            location="Sector B-3",
        ),
    ]


def demo_evidence():
    return [
        Evidence(
            id="1",
            device_id="DEV001",
            type="location",
            timestamp=_ts("2024-01-15T10:00:00"),
            data={"lat": 40.7128, "lng": -74.0060},
            preserved=True,
        ),
        Evidence(
            id="2",
            device_id="DEV001",
            type="interaction",
            timestamp=_ts("2024-01-15T10:15:00"),
            data={"interaction": "mesh_relay", "target": "DEV002"},
            preserved=False,
        ),
    ]


async def seed_demo_data(session_factory: Callable[[], AsyncSession]) -> bool:
    """Insert demo rows into an empty database. Returns True if seeded."""
    async with session_factory() as session:
        existing = await session.exec(select(User).limit(1))
        if existing.first() is not None:
            return False

        for row in demo_users() + demo_alerts() + demo_evidence():
            session.add(row)
        await session.commit()

    logger.info("Seeded demo users, alerts and evidence")
    return True
