from __future__ import annotations

import logging
from dataclasses import dataclass

from common.application.result import Err, ErrorCode, Ok, Result, not_found
from common.ports.unit_of_work import UnitOfWorkPort
from review.domain import messages
from review.ports.review_repo import ReviewRepositoryPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HelpfulToggleResult:
    review_id: int
    is_helpful: bool
    helpful_count: int

    @property
    def message(self) -> str:
        return messages.MARKED_HELPFUL if self.is_helpful else messages.UNMARKED_HELPFUL


class ToggleHelpfulVoteUseCase:
    """
    '도움돼요' 토글.

    (review, user) 행을 있으면 삭제, 없으면 생성합니다.
    서로 다른 사용자의 동시 투표는 각자 별도 행이라 유실되지 않고,
    같은 사용자의 동시 생성은 유니크 제약으로 하나만 남습니다.
    평점 집계에는 영향이 없습니다.
    """

    def __init__(
        self,
        *,
        review_repo: ReviewRepositoryPort,
        unit_of_work: UnitOfWorkPort,
    ):
        self._review_repo = review_repo
        self._uow = unit_of_work

    def execute(self, *, review_id: int, user_id: int) -> Result[HelpfulToggleResult]:
        with self._uow.atomic():
            review = self._review_repo.get(review_id=review_id)
            if review is None:
                return not_found("Review", review_id)
            if review.author_id == user_id:
                return Err(
                    code=ErrorCode.INVALID_OPERATION, message=messages.OWN_REVIEW_VOTE
                )

            if self._review_repo.remove_helpful_vote(
                review_id=review_id, user_id=user_id
            ):
                is_helpful = False
            else:
                # False 면 동시 요청이 먼저 넣은 것: 어느 쪽이든 결과는 "표시됨"
                self._review_repo.add_helpful_vote(review_id=review_id, user_id=user_id)
                is_helpful = True

            count = self._review_repo.count_helpful_votes(review_id=review_id)

        logger.info(
            f"Helpful vote toggled on Review {review_id} by user {user_id}: "
            f"is_helpful={is_helpful} count={count}"
        )
        return Ok(
            HelpfulToggleResult(
                review_id=review_id, is_helpful=is_helpful, helpful_count=count
            )
        )
