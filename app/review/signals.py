"""
승인된 리뷰가 삭제되면(작성자 탈퇴 cascade 등) 회사 평점 캐시를 다시 계산합니다.
"""

import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver
from review.domain.status import ReviewStatus
from review.models import Review
from review.services import ReviewService

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Review)
def refresh_rating_after_review_delete(sender, instance: Review, **kwargs):
    if instance.status != ReviewStatus.APPROVED.value:
        return
    logger.info(
        f"Approved Review {instance.id} deleted; "
        f"refreshing company {instance.company_id}"
    )
    ReviewService.refresh_rating(company_id=instance.company_id)
