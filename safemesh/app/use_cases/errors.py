"""
Error codes returned by use cases and the console facade.
"""

from safemesh.libs.result import Error


class ErrorCode:
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    INVALID_SETTINGS = "INVALID_SETTINGS"


def not_found(entity: str, entity_id: str, action: str) -> Error:
    return Error(
        ErrorCode.NOT_FOUND,
        f"{entity.capitalize()} {entity_id} not found",
        {"entity": entity, "id": entity_id, "action": action},
    )


def unauthenticated(action: str) -> Error:
    return Error(
        ErrorCode.UNAUTHENTICATED,
        "Authentication required",
        {"action": action},
    )
