from typing import Any, Dict

from fastapi import status

from safemesh.libs.result import Error


class ClientError(Exception):
    """Use case error the caller can act on (401 / 404 / 422 / 503)"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.base_error.code, "message": self.base_error.message}


class ServerError(Exception):
    """Unexpected use case error; the message is not exposed to clients"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.base_error.code, "message": "Internal server error"}
