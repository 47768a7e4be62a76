from __future__ import annotations

from django.db import models


class TimeStampedModel(models.Model):
    """
    생성/수정 시각 공통 필드.

    - created_at: 최초 저장 시각(불변)
    - updated_at: 마지막 저장 시각
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
