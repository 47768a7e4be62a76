from __future__ import annotations

from datetime import datetime
from typing import Protocol

from company.domain.company import CompanyRatingSnapshot


class CompanyRepositoryPort(Protocol):
    def exists(self, *, company_id: int) -> bool: ...

    def lock(self, *, company_id: int) -> bool:
        """
        트랜잭션 안에서 회사 행을 잠급니다(select_for_update).
        회사가 없으면 False.
        """
        ...

    def get_rating(self, *, company_id: int) -> CompanyRatingSnapshot | None: ...

    def save_rating(
        self,
        *,
        company_id: int,
        average: float,
        count: int,
        distribution: dict[str, int],
        updated_at: datetime,
    ) -> None: ...
