from __future__ import annotations

from typing import Iterable

from common.application.result import Err, ErrorCode, Ok, Result
from django.db import IntegrityError, transaction
from django.db.models import Count, F
from review.domain import messages
from review.domain.review import ReviewRecord
from review.domain.sorting import SORT_ORDERINGS, ReviewSort
from review.domain.status import ReviewStatus
from review.models import HelpfulVote, Review, ReviewReport
from review.ports.review_repo import ReviewRepositoryPort


def _to_record(obj: Review) -> ReviewRecord:
    return ReviewRecord(
        id=int(obj.id),
        company_id=int(obj.company_id),
        author_id=int(obj.author_id),
        rating=int(obj.rating),
        title=obj.title,
        content=obj.content,
        pros=obj.pros,
        cons=obj.cons,
        is_anonymous=bool(obj.is_anonymous),
        is_verified=bool(obj.is_verified),
        status=ReviewStatus(obj.status),
        report_count=int(obj.report_count),
        created_at=obj.created_at,
        updated_at=obj.updated_at,
        helpful_count=int(getattr(obj, "helpful_count", 0) or 0),
    )

class DjangoReviewRepository(ReviewRepositoryPort):
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
        # 바깥 트랜잭션을 깨지 않도록 savepoint 안에서 유니크 위반을 잡는다
        try:
            with transaction.atomic():
                obj = Review.objects.create(
                    company_id=company_id,
                    author_id=author_id,
                    rating=rating,
                    title=title,
                    content=content,
                    pros=pros,
                    cons=cons,
                    is_anonymous=is_anonymous,
                    is_verified=is_verified,
                    status=ReviewStatus(status).value,
                )
        except IntegrityError as e:
            return Err(
                code=ErrorCode.CONFLICT,
                message=messages.ALREADY_REVIEWED,
                details={"reason": str(e)},
            )
        return Ok(_to_record(obj))

    def exists_for_author(self, *, company_id: int, author_id: int) -> bool:
        return Review.objects.filter(
            company_id=company_id, author_id=author_id
        ).exists()

    def get(self, *, review_id: int) -> ReviewRecord | None:
        obj = Review.objects.filter(pk=review_id).first()
        return _to_record(obj) if obj is not None else None

    def lock(self, *, review_id: int) -> ReviewRecord | None:
        obj = Review.objects.select_for_update().filter(pk=review_id).first()
        return _to_record(obj) if obj is not None else None

    def set_status(self, *, review_id: int, status: ReviewStatus) -> None:
        obj = Review.objects.get(pk=review_id)
        obj.status = ReviewStatus(status).value
        obj.save(update_fields=["status", "updated_at"])

    def approved_rating_counts(self, *, company_id: int) -> dict[int, int]:
        rows = (
            Review.objects.filter(
                company_id=company_id, status=ReviewStatus.APPROVED.value
            )
            .order_by()
            .values("rating")
            .annotate(n=Count("id"))
        )
        return {int(row["rating"]): int(row["n"]) for row in rows}

    def list_approved(
        self,
        *,
        company_id: int,
        sort: ReviewSort,
        offset: int,
        limit: int,
    ) -> list[ReviewRecord]:
        qs = (
            Review.objects.filter(
                company_id=company_id, status=ReviewStatus.APPROVED.value
            )
            .annotate(helpful_count=Count("helpful_votes"))
            .order_by(*SORT_ORDERINGS[ReviewSort(sort)])
        )
        return [_to_record(obj) for obj in qs[offset : offset + limit]]

    def add_helpful_vote(self, *, review_id: int, user_id: int) -> bool:
        try:
            with transaction.atomic():
                HelpfulVote.objects.create(review_id=review_id, user_id=user_id)
        except IntegrityError:
            return False
        return True

    def remove_helpful_vote(self, *, review_id: int, user_id: int) -> bool:
        deleted, _ = HelpfulVote.objects.filter(
            review_id=review_id, user_id=user_id
        ).delete()
        return deleted > 0

    def count_helpful_votes(self, *, review_id: int) -> int:
        return HelpfulVote.objects.filter(review_id=review_id).count()

    def helpful_review_ids(
        self, *, review_ids: Iterable[int], user_id: int
    ) -> set[int]:
        ids = [int(i) for i in review_ids]
        if not ids:
            return set()
        return set(
            HelpfulVote.objects.filter(
                review_id__in=ids, user_id=user_id
            ).values_list("review_id", flat=True)
        )

    def add_report(self, *, review_id: int, user_id: int) -> bool:
        try:
            with transaction.atomic():
                ReviewReport.objects.create(review_id=review_id, user_id=user_id)
        except IntegrityError:
            return False
        return True

    def increment_report_count(self, *, review_id: int) -> int:
        Review.objects.filter(pk=review_id).update(
            report_count=F("report_count") + 1
        )
        return int(
            Review.objects.filter(pk=review_id)
            .values_list("report_count", flat=True)
            .get()
        )
