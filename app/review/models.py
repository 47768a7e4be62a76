from common.models import TimeStampedModel
from django.conf import settings
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models
from review.domain.status import ReviewStatus

STATUS_CHOICES = [
    (ReviewStatus.PENDING.value, "Pending"),
    (ReviewStatus.APPROVED.value, "Approved"),
    (ReviewStatus.REJECTED.value, "Rejected"),
]


class Review(TimeStampedModel):
    """
    회사 리뷰.

    - (company, author) 당 하나만 존재
    - approved 상태만 회사 평점 집계와 기본 목록에 포함
    - 익명 여부와 관계없이 author 는 항상 실제 작성자를 가리킴 (노출 시점에만 가림)
    """

    company = models.ForeignKey(
        "company.Company", on_delete=models.CASCADE, related_name="reviews"
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews"
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    title = models.CharField(max_length=100, validators=[MinLengthValidator(3)])
    content = models.TextField(
        max_length=2000, validators=[MinLengthValidator(10)]
    )
    pros = models.TextField(max_length=500, blank=True, default="")
    cons = models.TextField(max_length=500, blank=True, default="")
    is_anonymous = models.BooleanField(default=False)
    is_verified = models.BooleanField(
        default=False, help_text="작성 시점 작성자의 재직 인증 여부"
    )
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=ReviewStatus.PENDING.value,
        db_index=True,
    )
    report_count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "review"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["company", "author"], name="uniq_review_company_author"
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1) & models.Q(rating__lte=5),
                name="review_rating_range",
            ),
        ]
        indexes = [
            models.Index(
                fields=["company", "status", "-created_at"],
                name="review_company_status_idx",
            ),
        ]

    def __str__(self):
        return f"Review({self.id}) company={self.company_id} rating={self.rating}"


class HelpfulVote(models.Model):
    """'도움돼요' 표시. 행이 있으면 표시한 상태 (토글 = 생성/삭제)."""

    review = models.ForeignKey(
        Review, on_delete=models.CASCADE, related_name="helpful_votes"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="helpful_votes",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "review_helpful_vote"
        constraints = [
            models.UniqueConstraint(
                fields=["review", "user"], name="uniq_helpful_vote_review_user"
            ),
        ]


class ReviewReport(models.Model):
    """신고 이력. 사용자당 리뷰 하나에 한 번만 신고 가능."""

    review = models.ForeignKey(
        Review, on_delete=models.CASCADE, related_name="reports"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="review_reports",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "review_report"
        constraints = [
            models.UniqueConstraint(
                fields=["review", "user"], name="uniq_review_report_review_user"
            ),
        ]
