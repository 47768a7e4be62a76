from __future__ import annotations

from typing import Iterable, Protocol

from user.domain.reviewer import AuthorProfile, Reviewer


class UserDirectoryPort(Protocol):
    def get_reviewer(self, *, user_id: int) -> Reviewer | None: ...

    def get_display_profiles(
        self, *, user_ids: Iterable[int]
    ) -> dict[int, AuthorProfile]: ...
