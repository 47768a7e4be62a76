from __future__ import annotations

from typing import Mapping

from review.domain.review import (
    ANONYMOUS_AUTHOR,
    ReviewAuthor,
    ReviewListItem,
    ReviewRecord,
)
from user.domain.reviewer import AuthorProfile


def project_author(
    record: ReviewRecord, profiles: Mapping[int, AuthorProfile]
) -> ReviewAuthor:
    """
    읽기 시점에 작성자 정보를 투영합니다.
    익명 리뷰는 저장된 author_id와 무관하게 고정 placeholder 로 대체됩니다.
    """
    if record.is_anonymous:
        return ANONYMOUS_AUTHOR

    profile = profiles.get(record.author_id)
    if profile is None:
        # 탈퇴 등으로 프로필이 없는 경우에도 목록은 깨지지 않게
        return ReviewAuthor(id=record.author_id, name="", avatar=None, title=None)
    return ReviewAuthor(
        id=profile.user_id,
        name=profile.name,
        avatar=profile.avatar or None,
        title=profile.title or None,
    )


def to_list_item(
    record: ReviewRecord,
    *,
    profiles: Mapping[int, AuthorProfile],
    is_helpful: bool,
) -> ReviewListItem:
    return ReviewListItem(
        id=record.id,
        company_id=record.company_id,
        rating=record.rating,
        title=record.title,
        content=record.content,
        pros=record.pros,
        cons=record.cons,
        is_anonymous=record.is_anonymous,
        is_verified=record.is_verified,
        helpful_count=record.helpful_count,
        is_helpful=is_helpful,
        author=project_author(record, profiles),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
