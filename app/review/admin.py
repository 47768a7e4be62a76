from common.application.result import Err
from django.contrib import admin, messages
from review.models import HelpfulVote, Review, ReviewReport
from review.services import ReviewService


def _moderate(modeladmin, request, queryset, action: str, label: str):
    done, skipped = 0, []
    for review_id in queryset.values_list("id", flat=True):
        result = ReviewService.moderate_review(review_id=review_id, action=action)
        if isinstance(result, Err):
            skipped.append(str(review_id))
        else:
            done += 1

    modeladmin.message_user(
        request, f"{done}개의 리뷰를 {label}했습니다.", level=messages.SUCCESS
    )
    if skipped:
        modeladmin.message_user(
            request,
            f"대기(pending) 상태가 아니어서 건너뛴 리뷰: {', '.join(skipped)}",
            level=messages.WARNING,
        )


@admin.action(description="선택된 리뷰 승인")
def approve_reviews(modeladmin, request, queryset):
    _moderate(modeladmin, request, queryset, "approve", "승인")


@admin.action(description="선택된 리뷰 반려")
def reject_reviews(modeladmin, request, queryset):
    _moderate(modeladmin, request, queryset, "reject", "반려")


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "company",
        "author",
        "rating",
        "title",
        "status",
        "is_verified",
        "is_anonymous",
        "report_count",
        "created_at",
    )
    list_filter = ("status", "is_verified", "is_anonymous", "rating", "created_at")
    search_fields = ("title", "content", "company__name", "author__username")
    ordering = ("-created_at",)
    # 평점 캐시에 영향을 주는 값(회사/별점/상태)은 action 으로만 변경
    readonly_fields = (
        "company",
        "author",
        "rating",
        "status",
        "report_count",
        "is_verified",
        "is_anonymous",
        "created_at",
        "updated_at",
    )
    actions = [approve_reviews, reject_reviews]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(HelpfulVote)
class HelpfulVoteAdmin(admin.ModelAdmin):
    list_display = ("id", "review", "user", "created_at")
    search_fields = ("user__username",)
    raw_id_fields = ("review", "user")


@admin.register(ReviewReport)
class ReviewReportAdmin(admin.ModelAdmin):
    list_display = ("id", "review", "user", "created_at")
    list_filter = ("created_at",)
    search_fields = ("user__username",)
    raw_id_fields = ("review", "user")
