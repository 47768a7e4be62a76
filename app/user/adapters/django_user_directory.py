from __future__ import annotations

from typing import Iterable

from user.domain.reviewer import AuthorProfile, Reviewer
from user.models import User
from user.ports.user_directory import UserDirectoryPort


class DjangoUserDirectory(UserDirectoryPort):
    def get_reviewer(self, *, user_id: int) -> Reviewer | None:
        row = (
            User.objects.filter(pk=user_id, is_active=True)
            .values("id", "is_verified")
            .first()
        )
        if row is None:
            return None
        return Reviewer(user_id=int(row["id"]), is_verified=bool(row["is_verified"]))

    def get_display_profiles(
        self, *, user_ids: Iterable[int]
    ) -> dict[int, AuthorProfile]:
        ids = {int(i) for i in user_ids}
        if not ids:
            return {}
        return {
            int(user.id): AuthorProfile(
                user_id=int(user.id),
                name=user.public_name,
                avatar=user.avatar_url,
                title=user.headline,
            )
            for user in User.objects.filter(pk__in=ids)
        }
