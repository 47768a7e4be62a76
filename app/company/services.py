"""
Company Service

회사 조회 비즈니스 로직
"""

from typing import Optional

from company.models import Company


class CompanyService:
    """회사 조회 서비스 (회사 생성/수정은 이 서비스의 범위 밖)"""

    @staticmethod
    def get_company(company_id: int) -> Optional[Company]:
        try:
            return Company.objects.get(pk=company_id)
        except Company.DoesNotExist:
            return None
