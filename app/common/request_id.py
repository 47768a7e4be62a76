from __future__ import annotations

from contextvars import ContextVar

_DEFAULT = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=_DEFAULT)


def get_request_id() -> str:
    """현재 요청의 request_id (요청 밖에서는 "-")."""
    return _request_id.get()


def set_request_id(request_id: str | None) -> None:
    _request_id.set(request_id or _DEFAULT)


def clear_request_id() -> None:
    _request_id.set(_DEFAULT)
