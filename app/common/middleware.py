from __future__ import annotations

import logging
import uuid
from typing import Callable

from common.request_id import clear_request_id, set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 128


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성하거나 클라이언트가 보낸 X-Request-ID를 이어받고
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = self._resolve_request_id(request)

        # request 객체에도 달아두고(뷰에서 참조), contextvar에도 저장(로깅 필터에서 사용)
        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)
        try:
            response = self.get_response(request)
        finally:
            clear_request_id()

        response[self.response_header] = request_id
        return response

    def _resolve_request_id(self, request: HttpRequest) -> str:
        incoming = request.META.get(self.header_name)
        if incoming:
            candidate = str(incoming).strip()
            if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH:
                return candidate
            logger.debug("Ignoring malformed X-Request-ID header")
        return str(uuid.uuid4())
