from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from company.ports.company_repo import CompanyRepositoryPort
from review.domain.rating import RatingAggregate, aggregate_from_counts
from review.ports.review_repo import ReviewRepositoryPort

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RatingAggregator:
    """
    회사 평점 집계의 단일 진실 공급원.

    - recompute: 승인된 리뷰 전체를 다시 집계 (읽기 전용)
    - refresh: 회사 행을 잠그고 recompute 후 Company 평점 캐시에 기록

    refresh 는 호출자의 트랜잭션 안에서 실행되어야 하며, 기록 실패는 예외로 전파되어
    리뷰 변경까지 함께 롤백됩니다.
    """

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        company_repo: CompanyRepositoryPort,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._review_repo = review_repo
        self._company_repo = company_repo
        self._clock = clock

    def recompute(self, *, company_id: int) -> RatingAggregate:
        counts = self._review_repo.approved_rating_counts(company_id=company_id)
        return aggregate_from_counts(counts)

    def refresh(self, *, company_id: int) -> RatingAggregate:
        # 같은 회사의 재계산/기록을 직렬화 (잠금 이후 읽어야 다른 트랜잭션의 커밋이 보임)
        self._company_repo.lock(company_id=company_id)
        aggregate = self.recompute(company_id=company_id)
        self._company_repo.save_rating(
            company_id=company_id,
            average=aggregate.average,
            count=aggregate.count,
            distribution=aggregate.distribution,
            updated_at=self._clock(),
        )
        logger.info(
            f"Refreshed rating cache for company {company_id}: "
            f"average={aggregate.average} count={aggregate.count}"
        )
        return aggregate
