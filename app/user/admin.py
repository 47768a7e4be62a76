from django.contrib import admin, messages
from django.contrib.auth import get_user_model


@admin.action(description="선택된 사용자 재직 인증 처리")
def mark_verified(modeladmin, request, queryset):
    updated = queryset.filter(is_verified=False).update(is_verified=True)
    modeladmin.message_user(
        request,
        f"{updated}명의 사용자를 재직 인증 처리했습니다.",
        level=messages.SUCCESS,
    )


class UserAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "username",
        "email",
        "display_name",
        "headline",
        "is_verified",
        "date_joined",
    )
    list_filter = ("is_verified", "date_joined")
    search_fields = ("username", "email", "display_name")
    ordering = ("-date_joined",)
    actions = [mark_verified]


admin.site.register(get_user_model(), UserAdmin)
