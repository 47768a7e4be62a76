from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode:
    """유스케이스가 반환하는 에러 코드. HTTP 매핑은 common.http 참고."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_OPERATION = "INVALID_OPERATION"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: 프로그램적으로 구분 가능한 에러 코드 (ErrorCode 참고)
    - message: 사용자/로그용 메시지
    - details: 필드별 검증 오류 등 추가 정보(선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Ok[T] | Err


def not_found(entity: str, entity_id: object) -> Err:
    return Err(
        code=ErrorCode.NOT_FOUND,
        message=f"{entity} not found",
        details={"id": entity_id},
    )
