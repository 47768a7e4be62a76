from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """
    로그 레코드에 request_id를 주입합니다.

    리뷰 작성/투표/신고 로그를 같은 요청 단위로 묶어 추적하기 위해 사용합니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # 이미 extra로 request_id를 넘긴 경우는 존중
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
