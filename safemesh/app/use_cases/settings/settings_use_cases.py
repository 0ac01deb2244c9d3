"""
Settings Use Cases

Console settings live in the settings storage slot as JSON. Reads fall back
to defaults when the slot is missing or unreadable; writes report
STORAGE_UNAVAILABLE so the operator knows the change was not saved.
"""

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.storage import IKeyValueStorage, StorageUnavailable
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.errors import ErrorCode
from safemesh.domain.entities import AuditAction, SystemSettings
from safemesh.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


async def load_settings(storage: IKeyValueStorage, key: str) -> SystemSettings:
    try:
        raw = await storage.get(key)
    except StorageUnavailable as exc:
        logger.warning(f"Failed to load settings: {exc}")
        return SystemSettings()

    if raw is None:
        return SystemSettings()

    try:
        return SystemSettings.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as exc:
        logger.warning(f"Failed to parse settings, using defaults: {exc}")
        return SystemSettings()


class GetSettingsUseCase:
    def __init__(self, storage: IKeyValueStorage, key: str):
        self.storage = storage
        self.key = key

    async def execute(self) -> Result[SystemSettings]:
        return Return.ok(await load_settings(self.storage, self.key))


class UpdateSettingsUseCase:
    """
    Merge changes into the stored settings.

    Business Logic:
    1. Load current settings (defaults if absent)
    2. Apply and validate changes
    3. Return unchanged settings as-is when nothing differs (no audit entry)
    4. Save to the storage slot
    5. Create audit entry listing the changed keys
    """

    def __init__(
        self, uow: UnitOfWork, clock: IClock, storage: IKeyValueStorage, key: str
    ):
        self.uow = uow
        self.clock = clock
        self.storage = storage
        self.key = key

    async def execute(self, changes: Dict[str, Any], actor: str) -> Result[SystemSettings]:
        unknown = sorted(set(changes) - set(SystemSettings.model_fields))
        if unknown:
            return Return.err(
                Error(
                    ErrorCode.INVALID_SETTINGS,
                    f"Unknown settings: {', '.join(unknown)}",
                    {"keys": unknown},
                )
            )

        current = await load_settings(self.storage, self.key)
        try:
            updated = SystemSettings.model_validate({**current.model_dump(), **changes})
        except ValidationError as exc:
            return Return.err(Error(ErrorCode.INVALID_SETTINGS, str(exc)))

        previous = current.model_dump()
        changed = sorted(k for k, v in updated.model_dump().items() if previous[k] != v)
        if not changed:
            return Return.ok(current)

        return await _save(
            self.uow,
            self.clock,
            self.storage,
            self.key,
            updated,
            actor,
            AuditAction.SETTINGS_UPDATED,
            f"Changed: {', '.join(changed)}",
        )


class ResetSettingsUseCase:
    def __init__(
        self, uow: UnitOfWork, clock: IClock, storage: IKeyValueStorage, key: str
    ):
        self.uow = uow
        self.clock = clock
        self.storage = storage
        self.key = key

    async def execute(self, actor: str) -> Result[SystemSettings]:
        return await _save(
            self.uow,
            self.clock,
            self.storage,
            self.key,
            SystemSettings(),
            actor,
            AuditAction.SETTINGS_RESET,
            "Settings restored to defaults",
        )


async def _save(
    uow: UnitOfWork,
    clock: IClock,
    storage: IKeyValueStorage,
    key: str,
    settings: SystemSettings,
    actor: str,
    action: str,
    details: str,
) -> Result[SystemSettings]:
    try:
        await storage.set(key, settings.model_dump_json())
    except StorageUnavailable as exc:
        logger.warning(f"Failed to save settings: {exc}")
        return Return.err(
            Error(
                ErrorCode.STORAGE_UNAVAILABLE,
                "Failed to save settings",
                {"key": key, "action": action},
            )
        )

    async with uow:
        await AuditRecorder(uow, clock).record(action, actor, details)
        await uow.commit()

    return Return.ok(settings)
