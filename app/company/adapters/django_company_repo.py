from __future__ import annotations

from datetime import datetime

from company.domain.company import CompanyRatingSnapshot
from company.models import Company
from company.ports.company_repo import CompanyRepositoryPort


class CompanyRatingWriteError(RuntimeError):
    """평점 캐시를 기록할 회사 행이 사라진 경우."""


class DjangoCompanyRepository(CompanyRepositoryPort):
    def exists(self, *, company_id: int) -> bool:
        return Company.objects.filter(pk=company_id).exists()

    def lock(self, *, company_id: int) -> bool:
        return (
            Company.objects.select_for_update()
            .filter(pk=company_id)
            .values_list("id", flat=True)
            .first()
            is not None
        )

    def get_rating(self, *, company_id: int) -> CompanyRatingSnapshot | None:
        row = (
            Company.objects.filter(pk=company_id)
            .values(
                "id",
                "rating_average",
                "rating_count",
                "rating_distribution",
                "rating_updated_at",
            )
            .first()
        )
        if row is None:
            return None
        return CompanyRatingSnapshot(
            company_id=int(row["id"]),
            average=float(row["rating_average"]),
            count=int(row["rating_count"]),
            distribution=dict(row["rating_distribution"] or {}),
            updated_at=row["rating_updated_at"],
        )

    def save_rating(
        self,
        *,
        company_id: int,
        average: float,
        count: int,
        distribution: dict[str, int],
        updated_at: datetime,
    ) -> None:
        # updated_at(auto_now)은 프로필 수정 시각이라 .update()로 건드리지 않음
        updated = Company.objects.filter(pk=company_id).update(
            rating_average=average,
            rating_count=count,
            rating_distribution=distribution,
            rating_updated_at=updated_at,
        )
        if updated != 1:
            raise CompanyRatingWriteError(
                f"Failed to write rating cache for company {company_id}"
            )
