from __future__ import annotations

import logging
from dataclasses import dataclass

from common.application.result import Err, ErrorCode, Ok, Result, not_found
from common.ports.unit_of_work import UnitOfWorkPort
from review.application.rating_aggregator import RatingAggregator
from review.domain.status import ReviewStatus, affects_rating, can_transition
from review.ports.review_repo import ReviewRepositoryPort

logger = logging.getLogger(__name__)

MODERATION_TARGETS: dict[str, ReviewStatus] = {
    "approve": ReviewStatus.APPROVED,
    "reject": ReviewStatus.REJECTED,
}


@dataclass(frozen=True, slots=True)
class ModerationResult:
    review_id: int
    previous_status: ReviewStatus
    status: ReviewStatus


class ModerateReviewUseCase:
    """관리자 승인/반려. pending 리뷰만 대상이며 rejected 는 되돌릴 수 없습니다."""

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        rating_aggregator: RatingAggregator,
        unit_of_work: UnitOfWorkPort,
    ):
        self._review_repo = review_repo
        self._rating_aggregator = rating_aggregator
        self._uow = unit_of_work

    def execute(self, *, review_id: int, action: str) -> Result[ModerationResult]:
        target = MODERATION_TARGETS.get(action)
        if target is None:
            return Err(
                code=ErrorCode.VALIDATION_ERROR,
                message="Invalid moderation action",
                details={
                    "action": [f"Must be one of: {', '.join(MODERATION_TARGETS)}."]
                },
            )

        with self._uow.atomic():
            review = self._review_repo.lock(review_id=review_id)
            if review is None:
                return not_found("Review", review_id)

            previous = review.status
            # approved -> rejected 는 신고 임계값 전용 전환
            if previous is not ReviewStatus.PENDING or not can_transition(
                previous, target
            ):
                return Err(
                    code=ErrorCode.INVALID_OPERATION,
                    message=f"Cannot {action} a review that is {previous.value}",
                    details={"status": previous.value},
                )

            self._review_repo.set_status(review_id=review_id, status=target)
            if affects_rating(previous, target):
                self._rating_aggregator.refresh(company_id=review.company_id)

        logger.info(f"Review {review_id} moderated: {previous.value} -> {target.value}")
        return Ok(
            ModerationResult(
                review_id=review_id, previous_status=previous, status=target
            )
        )
