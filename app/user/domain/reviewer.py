from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Reviewer:
    """리뷰 작성 가능 여부 판단에 필요한 사용자 정보."""

    user_id: int
    is_verified: bool


@dataclass(frozen=True, slots=True)
class AuthorProfile:
    """리뷰 목록에 노출되는 작성자 정보."""

    user_id: int
    name: str
    avatar: str
    title: str
