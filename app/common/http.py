"""
Result(Err) → DRF Response 변환.

뷰는 유스케이스 결과만 보고 응답 형태를 정하고, 상태 코드 매핑은 여기 한 곳에 둡니다.
"""

from __future__ import annotations

from typing import Any

from common.application.result import Err, ErrorCode
from rest_framework import status
from rest_framework.response import Response

ERROR_STATUS: dict[str, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_OPERATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


def error_response(err: Err) -> Response:
    body: dict[str, Any] = {"error": err.message, "error_code": err.code}
    if err.details:
        body["details"] = err.details
    return Response(
        body, status=ERROR_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST)
    )


def validation_error_response(errors: Any) -> Response:
    """serializer.errors 를 VALIDATION_ERROR 형태로 감쌉니다."""
    return error_response(
        Err(
            code=ErrorCode.VALIDATION_ERROR,
            message="Invalid request data",
            details=dict(errors),
        )
    )


def success_response(
    data: Any,
    *,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    body.update(extra)
    return Response(body, status=status_code)


def server_error_response(message: str) -> Response:
    return Response(
        {"error": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
