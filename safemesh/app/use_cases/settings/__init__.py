from .settings_use_cases import (
    GetSettingsUseCase,
    ResetSettingsUseCase,
    UpdateSettingsUseCase,
)

__all__ = [
    "GetSettingsUseCase",
    "UpdateSettingsUseCase",
    "ResetSettingsUseCase",
]
