"""
User Management Use Cases
"""

from .toggle_user_status_use_case import ToggleUserStatusUseCase
from .list_users_use_case import ListUsersUseCase

__all__ = [
    "ToggleUserStatusUseCase",
    "ListUsersUseCase",
]
