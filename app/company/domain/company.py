from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CompanyRatingSnapshot:
    """Company 행에 저장된 평점 캐시 값."""

    company_id: int
    average: float
    count: int
    distribution: dict[str, int]
    updated_at: datetime | None
