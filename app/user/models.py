from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    잡보드 사용자.

    리뷰 작성자 표시 정보(display_name/avatar_url/headline)와
    재직 인증 여부(is_verified)를 가집니다. is_verified 사용자의 리뷰는 바로 공개됩니다.
    """

    display_name = models.CharField(max_length=150, blank=True, default="")
    avatar_url = models.URLField(max_length=500, blank=True, default="")
    headline = models.CharField(
        max_length=150,
        blank=True,
        default="",
        help_text="리뷰에 함께 표시되는 직함 (예: Backend Engineer)",
    )
    is_verified = models.BooleanField(
        default=False,
        help_text="재직 인증 여부",
    )

    @property
    def public_name(self) -> str:
        full_name = self.get_full_name()
        return self.display_name or full_name or self.username
