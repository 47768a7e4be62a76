from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from review.domain.status import ReviewStatus

ANONYMOUS_NAME = "Anonymous User"


@dataclass(frozen=True, slots=True)
class ReviewRecord:
    id: int
    company_id: int
    author_id: int
    rating: int
    title: str
    content: str
    pros: str
    cons: str
    is_anonymous: bool
    is_verified: bool
    status: ReviewStatus
    report_count: int
    created_at: datetime
    updated_at: datetime
    helpful_count: int = 0


@dataclass(frozen=True, slots=True)
class ReviewAuthor:
    """목록에 노출되는 작성자 블록. 익명 리뷰는 id/avatar/title 이 None."""

    id: int | None
    name: str
    avatar: str | None
    title: str | None


ANONYMOUS_AUTHOR = ReviewAuthor(id=None, name=ANONYMOUS_NAME, avatar=None, title=None)


@dataclass(frozen=True, slots=True)
class ReviewListItem:
    id: int
    company_id: int
    rating: int
    title: str
    content: str
    pros: str
    cons: str
    is_anonymous: bool
    is_verified: bool
    helpful_count: int
    is_helpful: bool
    author: ReviewAuthor
    created_at: datetime
    updated_at: datetime
