"""
Review Service

리뷰 작성/조회/투표/신고/관리 진입점. 뷰와 admin 은 이 façade 만 사용합니다.
"""

from __future__ import annotations

from typing import Any, Mapping

from common.application.result import Err, ErrorCode, Result
from common.adapters.django_unit_of_work import DjangoUnitOfWork
from review.application.container import (
    build_list_company_reviews_usecase,
    build_moderate_review_usecase,
    build_rating_aggregator,
    build_report_review_usecase,
    build_submit_review_usecase,
    build_toggle_helpful_vote_usecase,
)
from review.application.usecases.list_company_reviews import ReviewPage
from review.application.usecases.moderate_review import ModerationResult
from review.application.usecases.report_review import ReportResult
from review.application.usecases.submit_review import SubmitReviewResult
from review.application.usecases.toggle_helpful_vote import HelpfulToggleResult
from review.domain.rating import RatingAggregate

VOTE_ACTIONS = ("helpful", "report")


class ReviewService:
    @staticmethod
    def submit_review(
        *, company_id: int, author_id: int, payload: Mapping[str, Any]
    ) -> Result[SubmitReviewResult]:
        usecase = build_submit_review_usecase()
        return usecase.execute(
            company_id=company_id, author_id=author_id, payload=payload
        )

    @staticmethod
    def list_company_reviews(
        *,
        company_id: int,
        page: int = 1,
        page_size: int | None = None,
        sort: str | None = None,
        viewer_id: int | None = None,
    ) -> Result[ReviewPage]:
        usecase = build_list_company_reviews_usecase()
        return usecase.execute(
            company_id=company_id,
            page=page,
            page_size=page_size,
            sort=sort,
            viewer_id=viewer_id,
        )

    @staticmethod
    def toggle_helpful(*, review_id: int, user_id: int) -> Result[HelpfulToggleResult]:
        usecase = build_toggle_helpful_vote_usecase()
        return usecase.execute(review_id=review_id, user_id=user_id)

    @staticmethod
    def report_review(*, review_id: int, user_id: int) -> Result[ReportResult]:
        usecase = build_report_review_usecase()
        return usecase.execute(review_id=review_id, user_id=user_id)

    @staticmethod
    def vote(
        *, review_id: int, user_id: int, action: str
    ) -> Result[HelpfulToggleResult | ReportResult]:
        """POST /reviews/<id>/vote/ 의 action("helpful" | "report") 분기."""
        if action == "helpful":
            return ReviewService.toggle_helpful(review_id=review_id, user_id=user_id)
        if action == "report":
            return ReviewService.report_review(review_id=review_id, user_id=user_id)
        return Err(
            code=ErrorCode.VALIDATION_ERROR,
            message="Invalid action",
            details={"action": [f"Must be one of: {', '.join(VOTE_ACTIONS)}."]},
        )

    @staticmethod
    def moderate_review(*, review_id: int, action: str) -> Result[ModerationResult]:
        usecase = build_moderate_review_usecase()
        return usecase.execute(review_id=review_id, action=action)

    @staticmethod
    def get_rating(*, company_id: int) -> RatingAggregate:
        return build_rating_aggregator().recompute(company_id=company_id)

    @staticmethod
    def refresh_rating(*, company_id: int) -> RatingAggregate:
        """캐시 재계산 (admin 복구용). 호출자 트랜잭션이 없으면 새로 연다."""
        with DjangoUnitOfWork().atomic():
            return build_rating_aggregator().refresh(company_id=company_id)
