from __future__ import annotations

from enum import Enum


class ReviewStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# pending → approved/rejected (moderation), approved → rejected (신고 누적).
# rejected 는 종료 상태이며 어떤 상태도 pending 으로 돌아가지 않는다.
ALLOWED_TRANSITIONS: dict[ReviewStatus, frozenset[ReviewStatus]] = {
    ReviewStatus.PENDING: frozenset({ReviewStatus.APPROVED, ReviewStatus.REJECTED}),
    ReviewStatus.APPROVED: frozenset({ReviewStatus.REJECTED}),
    ReviewStatus.REJECTED: frozenset(),
}


def can_transition(current: ReviewStatus | str, target: ReviewStatus | str) -> bool:
    return ReviewStatus(target) in ALLOWED_TRANSITIONS[ReviewStatus(current)]


def initial_status(*, author_verified: bool) -> ReviewStatus:
    """재직 인증된 작성자의 리뷰는 바로 승인된다."""
    return ReviewStatus.APPROVED if author_verified else ReviewStatus.PENDING


def affects_rating(previous: ReviewStatus | str, current: ReviewStatus | str) -> bool:
    """승인 집합 소속이 바뀌는 전이인지 (평점 재계산 필요 여부)."""
    was = ReviewStatus(previous) is ReviewStatus.APPROVED
    now = ReviewStatus(current) is ReviewStatus.APPROVED
    return was != now
