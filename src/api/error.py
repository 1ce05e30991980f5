from fastapi import status
from src.libs.result import Error


NOT_AUTHENTICATED = Error("NOT_AUTHENTICATED", "Not authenticated.")
INVALID_SESSION = Error("INVALID_SESSION", "Invalid or expired session.")
INVALID_REQUEST = Error("VALIDATION_ERROR", "Invalid request body.")
INTERNAL_ERROR = Error("INTERNAL_ERROR", "Internal server error")


def error_body(error: Error) -> dict:
    """JSON error payload; the top-level message is what the browser client shows"""
    return {"message": error.message, "error": {"code": error.code, "message": error.message}}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    @property
    def body(self) -> dict:
        return error_body(self.base_error)


class ServerError(Exception):
    """Server-side failure; details stay in the log, clients get a generic message"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    @property
    def body(self) -> dict:
        return error_body(Error(self.base_error.code, INTERNAL_ERROR.message))
