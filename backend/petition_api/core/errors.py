"""
Error taxonomy for the petition API.

Every error carries its HTTP status and renders to the JSON envelope
{"error": ..., **extra}. Raised from route code, rendered by the
exception handlers registered in main.py.
"""
from typing import Any, Dict, Optional


class PetitionAPIError(Exception):
    """Base class: terminal failure for the current request."""
    status_code: int = 500
    default_message: str = "탄원서 생성 중 오류가 발생했습니다."

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class UnsupportedMethod(PetitionAPIError):
    status_code = 405
    default_message = "Method not allowed"


class RateLimitExceeded(PetitionAPIError):
    """Daily cap reached; the client may retry the next calendar day (UTC)."""
    status_code = 429
    default_message = "오늘 무료 사용 횟수를 모두 사용하셨습니다."

    def __init__(self, used: int, limit: int):
        super().__init__()
        self.used = used
        self.limit = limit

    def to_body(self) -> Dict[str, Any]:
        return {
            "error": "RATE_LIMIT_EXCEEDED",
            "message": self.message,
            "used": self.used,
            "limit": self.limit,
            "remaining": 0,
        }


class ServerMisconfiguration(PetitionAPIError):
    status_code = 500
    default_message = "Server configuration error"


class MissingField(PetitionAPIError):
    status_code = 400
    default_message = "필수 정보가 누락되었습니다."


class InvalidRequestBody(PetitionAPIError):
    status_code = 400
    default_message = "잘못된 요청 형식입니다."


class DownstreamFailure(PetitionAPIError):
    """Completion API returned an error or could not be reached."""
    status_code = 500
