from __future__ import annotations

import math
from dataclasses import dataclass

from common.application.result import Err, ErrorCode, Ok, Result, not_found
from company.ports.company_repo import CompanyRepositoryPort
from review.application.rating_aggregator import RatingAggregator
from review.domain.redaction import to_list_item
from review.domain.review import ReviewListItem
from review.domain.sorting import ReviewSort, parse_sort
from review.ports.review_repo import ReviewRepositoryPort
from user.ports.user_directory import UserDirectoryPort


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    page_size: int
    total: int
    total_pages: int


@dataclass(frozen=True, slots=True)
class ReviewPage:
    reviews: list[ReviewListItem]
    average_rating: float
    total_reviews: int
    distribution: dict[str, int]
    pagination: Pagination
    sort: ReviewSort


class ListCompanyReviewsUseCase:
    """
    회사 리뷰 목록 조회 (읽기 전용).

    approved 리뷰만, 정렬 + offset/limit 페이지네이션.
    평균/개수/분포는 RatingAggregator 로 계산합니다.
    """

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        company_repo: CompanyRepositoryPort,
        user_directory: UserDirectoryPort,
        rating_aggregator: RatingAggregator,
        default_page_size: int,
        max_page_size: int,
    ):
        self._review_repo = review_repo
        self._company_repo = company_repo
        self._user_directory = user_directory
        self._rating_aggregator = rating_aggregator
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    def execute(
        self,
        *,
        company_id: int,
        page: int = 1,
        page_size: int | None = None,
        sort: str | None = None,
        viewer_id: int | None = None,
    ) -> Result[ReviewPage]:
        if page_size is None:
            page_size = self._default_page_size

        errors: dict[str, list[str]] = {}
        if page < 1:
            errors["page"] = ["Ensure this value is greater than or equal to 1."]
        if page_size < 1 or page_size > self._max_page_size:
            errors["page_size"] = [
                f"Ensure this value is between 1 and {self._max_page_size}."
            ]
        sort_key = parse_sort(sort)
        if sort_key is None:
            errors["sort"] = [
                f"Must be one of: {', '.join(s.value for s in ReviewSort)}."
            ]
        if errors:
            return Err(
                code=ErrorCode.VALIDATION_ERROR,
                message="Invalid list parameters",
                details=errors,
            )
        assert sort_key is not None

        if not self._company_repo.exists(company_id=company_id):
            return not_found("Company", company_id)

        aggregate = self._rating_aggregator.recompute(company_id=company_id)
        records = self._review_repo.list_approved(
            company_id=company_id,
            sort=sort_key,
            offset=(page - 1) * page_size,
            limit=page_size,
        )

        profiles = self._user_directory.get_display_profiles(
            user_ids={r.author_id for r in records if not r.is_anonymous}
        )
        helpful_ids: set[int] = set()
        if viewer_id is not None:
            helpful_ids = self._review_repo.helpful_review_ids(
                review_ids=[r.id for r in records], user_id=viewer_id
            )

        items = [
            to_list_item(r, profiles=profiles, is_helpful=r.id in helpful_ids)
            for r in records
        ]
        total = aggregate.count
        return Ok(
            ReviewPage(
                reviews=items,
                average_rating=aggregate.average,
                total_reviews=total,
                distribution=aggregate.distribution,
                pagination=Pagination(
                    page=page,
                    page_size=page_size,
                    total=total,
                    total_pages=math.ceil(total / page_size),
                ),
                sort=sort_key,
            )
        )
