from __future__ import annotations

from typing import Iterable, Protocol

from common.application.result import Result
from review.domain.review import ReviewRecord
from review.domain.sorting import ReviewSort
from review.domain.status import ReviewStatus


class ReviewRepositoryPort(Protocol):
    # --- review record ---
    def create(
        self,
        *,
        company_id: int,
        author_id: int,
        rating: int,
        title: str,
        content: str,
        pros: str,
        cons: str,
        is_anonymous: bool,
        is_verified: bool,
        status: ReviewStatus,
    ) -> Result[ReviewRecord]:
        """(company, author) 유니크 위반 시 Err(CONFLICT)."""
        ...

    def exists_for_author(self, *, company_id: int, author_id: int) -> bool: ...

    def get(self, *, review_id: int) -> ReviewRecord | None: ...

    def lock(self, *, review_id: int) -> ReviewRecord | None:
        """트랜잭션 안에서 리뷰 행을 잠그고 최신 값을 읽습니다."""
        ...

    def set_status(self, *, review_id: int, status: ReviewStatus) -> None: ...

    # --- approved set ---
    def approved_rating_counts(self, *, company_id: int) -> dict[int, int]:
        """승인된 리뷰의 별점별 개수 {rating: n}."""
        ...

    def list_approved(
        self,
        *,
        company_id: int,
        sort: ReviewSort,
        offset: int,
        limit: int,
    ) -> list[ReviewRecord]: ...

    # --- helpful votes ---
    def add_helpful_vote(self, *, review_id: int, user_id: int) -> bool:
        """새로 추가했으면 True, 이미 있었으면 False."""
        ...

    def remove_helpful_vote(self, *, review_id: int, user_id: int) -> bool:
        """삭제했으면 True, 없었으면 False."""
        ...

    def count_helpful_votes(self, *, review_id: int) -> int: ...

    def helpful_review_ids(
        self, *, review_ids: Iterable[int], user_id: int
    ) -> set[int]: ...

    # --- report ledger ---
    def add_report(self, *, review_id: int, user_id: int) -> bool:
        """신고 이력 추가. 이미 신고했으면 False."""
        ...

    def increment_report_count(self, *, review_id: int) -> int:
        """report_count 를 원자적으로 1 증가시키고 새 값을 반환합니다."""
        ...
