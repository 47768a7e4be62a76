from __future__ import annotations

import logging
from dataclasses import dataclass

from common.application.result import Err, ErrorCode, Ok, Result, not_found
from common.ports.unit_of_work import UnitOfWorkPort
from review.application.rating_aggregator import RatingAggregator
from review.domain import messages
from review.domain.status import ReviewStatus, affects_rating, can_transition
from review.ports.review_repo import ReviewRepositoryPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportResult:
    review_id: int
    report_count: int
    status: ReviewStatus
    auto_rejected: bool = False


class ReportReviewUseCase:
    """
    리뷰 신고.

    - 사용자당 한 번 (신고 이력 + 유니크 제약)
    - report_count 가 임계값에 도달하면 rejected 로 전환
    - approved 였던 리뷰가 빠지면 같은 트랜잭션에서 평점 캐시 갱신
    """

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        rating_aggregator: RatingAggregator,
        unit_of_work: UnitOfWorkPort,
        report_threshold: int,
    ):
        self._review_repo = review_repo
        self._rating_aggregator = rating_aggregator
        self._uow = unit_of_work
        self._threshold = report_threshold

    def execute(self, *, review_id: int, user_id: int) -> Result[ReportResult]:
        auto_rejected = False
        with self._uow.atomic():
            # 리뷰 행 잠금: 카운터 증가와 상태 전환을 한 번에 한 요청만
            review = self._review_repo.lock(review_id=review_id)
            if review is None:
                return not_found("Review", review_id)
            if review.author_id == user_id:
                return Err(
                    code=ErrorCode.INVALID_OPERATION, message=messages.OWN_REVIEW_VOTE
                )

            if not self._review_repo.add_report(review_id=review_id, user_id=user_id):
                logger.info(f"Duplicate report on Review {review_id} by user {user_id}")
                return Err(
                    code=ErrorCode.INVALID_OPERATION, message=messages.ALREADY_REPORTED
                )

            report_count = self._review_repo.increment_report_count(review_id=review_id)
            status = review.status
            if report_count >= self._threshold and can_transition(
                status, ReviewStatus.REJECTED
            ):
                self._review_repo.set_status(
                    review_id=review_id, status=ReviewStatus.REJECTED
                )
                auto_rejected = True
                if affects_rating(status, ReviewStatus.REJECTED):
                    self._rating_aggregator.refresh(company_id=review.company_id)
                status = ReviewStatus.REJECTED

        if auto_rejected:
            logger.warning(
                f"Review {review_id} auto-rejected after {report_count} reports"
            )
        else:
            logger.info(
                f"Review {review_id} reported by user {user_id} (count={report_count})"
            )
        return Ok(
            ReportResult(
                review_id=review_id,
                report_count=report_count,
                status=status,
                auto_rejected=auto_rejected,
            )
        )
