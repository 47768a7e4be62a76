from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from common.application.result import Err, ErrorCode, Ok, Result, not_found
from common.ports.unit_of_work import UnitOfWorkPort
from company.ports.company_repo import CompanyRepositoryPort
from pydantic import ValidationError
from review.application.rating_aggregator import RatingAggregator
from review.domain import messages
from review.domain.review import ReviewRecord
from review.domain.status import ReviewStatus, initial_status
from review.dtos import ReviewSubmission, validation_error_details
from review.ports.review_repo import ReviewRepositoryPort
from user.ports.user_directory import UserDirectoryPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmitReviewResult:
    review: ReviewRecord
    published: bool
    message: str

class SubmitReviewUseCase:
    """
    리뷰 작성 유스케이스.

    - payload 검증 → 회사/작성자 확인 → 중복 작성 방지
    - 재직 인증 작성자는 바로 approved, 아니면 pending
    - approved 로 생성되면 같은 트랜잭션에서 회사 평점 캐시 갱신
    """

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        company_repo: CompanyRepositoryPort,
        user_directory: UserDirectoryPort,
        rating_aggregator: RatingAggregator,
        unit_of_work: UnitOfWorkPort,
    ):
        self._review_repo = review_repo
        self._company_repo = company_repo
        self._user_directory = user_directory
        self._rating_aggregator = rating_aggregator
        self._uow = unit_of_work

    def execute(
        self, *, company_id: int, author_id: int, payload: Mapping[str, Any]
    ) -> Result[SubmitReviewResult]:
        try:
            submission = ReviewSubmission.model_validate(payload)
        except ValidationError as e:
            return Err(
                code=ErrorCode.VALIDATION_ERROR,
                message="Invalid review data",
                details=validation_error_details(e),
            )

        with self._uow.atomic():
            # 회사 행 잠금: 같은 회사의 평점 재계산/기록 직렬화
            if not self._company_repo.lock(company_id=company_id):
                return not_found("Company", company_id)

            reviewer = self._user_directory.get_reviewer(user_id=author_id)
            if reviewer is None:
                return not_found("User", author_id)

            if self._review_repo.exists_for_author(
                company_id=company_id, author_id=author_id
            ):
                logger.info(
                    f"Duplicate review rejected: company {company_id}, "
                    f"author {author_id}"
                )
                return Err(code=ErrorCode.CONFLICT, message=messages.ALREADY_REVIEWED)

            status = initial_status(author_verified=reviewer.is_verified)
            created = self._review_repo.create(
                company_id=company_id,
                author_id=author_id,
                rating=submission.rating,
                title=submission.title,
                content=submission.content,
                pros=submission.pros or "",
                cons=submission.cons or "",
                is_anonymous=submission.is_anonymous,
                is_verified=reviewer.is_verified,
                status=status,
            )
            if isinstance(created, Err):
                # 동시 작성 경쟁에서 진 경우 (유니크 제약)
                logger.info(
                    f"Concurrent duplicate review: company {company_id}, "
                    f"author {author_id}"
                )
                return created

            assert isinstance(created, Ok)
            published = status is ReviewStatus.APPROVED
            if published:
                self._rating_aggregator.refresh(company_id=company_id)

        logger.info(
            f"Created Review {created.value.id} for company {company_id} "
            f"(status={status.value})"
        )
        return Ok(
            SubmitReviewResult(
                review=created.value,
                published=published,
                message=messages.PUBLISHED if published else messages.PENDING_APPROVAL,
            )
        )
