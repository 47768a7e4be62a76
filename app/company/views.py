"""
Company Views

회사 상세(평점 캐시 포함) 조회 API (Thin Controller)
"""

import logging

from common.application.result import not_found
from common.http import error_response, server_error_response, success_response
from company.serializers import CompanySerializer
from company.services import CompanyService
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class CompanyDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CompanySerializer},
        summary="Company detail",
        description="회사 프로필과 평점 캐시(average/count/distribution)를 조회합니다.",
    )
    def get(self, request, company_id: int):
        """
        회사 상세 조회

        GET /api/v1/companies/<company_id>/
        """
        try:
            company = CompanyService.get_company(company_id)
            if company is None:
                return error_response(not_found("Company", company_id))
            return success_response(CompanySerializer(company).data)
        except Exception as e:
            logger.error(
                f"Failed to retrieve company {company_id}: {str(e)}", exc_info=True
            )
            return server_error_response("Failed to retrieve company")
