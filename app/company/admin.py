from company.models import Company
from django.contrib import admin, messages
from review.services import ReviewService


@admin.action(description="선택된 회사 평점 캐시 재계산")
def refresh_rating_cache(modeladmin, request, queryset):
    refreshed = 0
    for company_id in queryset.values_list("id", flat=True):
        ReviewService.refresh_rating(company_id=company_id)
        refreshed += 1
    modeladmin.message_user(
        request,
        f"{refreshed}개 회사의 평점 캐시를 재계산했습니다.",
        level=messages.SUCCESS,
    )


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "industry",
        "location",
        "rating_average",
        "rating_count",
        "rating_updated_at",
    )
    list_filter = ("industry",)
    search_fields = ("name", "slug", "industry", "location")
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = (
        "rating_average",
        "rating_count",
        "rating_distribution",
        "rating_updated_at",
        "created_at",
        "updated_at",
    )
    actions = [refresh_rating_cache]
