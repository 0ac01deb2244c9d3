from .record_login_use_case import RecordLoginUseCase

__all__ = ["RecordLoginUseCase"]
