from dataclasses import dataclass, field
from typing import Union

NO_SUMMARY = "No summary available."
FALLBACK_SUMMARY = "Weather AI service temporarily unavailable. Please try again later."
INVALID_DATA = "The given data was invalid."


@dataclass(frozen=True)
class ValidationError:
    """입력값 오류 (필드명 -> 메시지 목록). 네트워크 호출 전에 끝난다."""
    errors: dict[str, list[str]]
    status: int = 422

    def to_body(self) -> dict:
        return {"message": INVALID_DATA, "errors": self.errors}


@dataclass(frozen=True)
class UpstreamError:
    """AI 서버 쪽 실패. message는 로그용이고 클라이언트에는 절대 나가지 않는다."""
    message: str
    cause: Exception | None = field(default=None, compare=False)
    status: int = 500

    def to_body(self) -> dict:
        return {"summary": FALLBACK_SUMMARY}


@dataclass(frozen=True)
class Ok:
    value: object
    degraded: bool = False
    status: int = 200


@dataclass(frozen=True)
class Err:
    error: Union[ValidationError, UpstreamError]

    @property
    def status(self) -> int:
        return self.error.status


Result = Union[Ok, Err]
