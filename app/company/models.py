from common.models import TimeStampedModel
from django.db import models


def empty_distribution() -> dict:
    return {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}


class Company(TimeStampedModel):
    """
    회사 프로필 + 평점 캐시.

    rating_* 필드는 승인된(approved) 리뷰 집계의 비정규화 캐시이며
    review 앱의 유스케이스만 갱신합니다. 직접 수정하지 마세요.
    """

    name = models.CharField(max_length=200, unique=True)
    slug = models.SlugField(max_length=220, unique=True, blank=True, null=True)
    industry = models.CharField(max_length=100, blank=True, default="")
    location = models.CharField(max_length=200, blank=True, default="")
    website = models.URLField(max_length=500, blank=True, default="")
    description = models.TextField(blank=True, default="")

    # 평점 캐시
    rating_average = models.FloatField(default=0.0)
    rating_count = models.PositiveIntegerField(default=0)
    rating_distribution = models.JSONField(default=empty_distribution)
    rating_updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "company"
        ordering = ["name"]

    def __str__(self):
        return self.name
