"""
Review Views

회사 리뷰 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import Err, Ok
from common.http import (
    error_response,
    server_error_response,
    success_response,
    validation_error_response,
)
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from review.application.usecases.report_review import ReportResult
from review.domain import messages
from review.serializers import (
    HelpfulToggleSerializer,
    PaginationSerializer,
    ReportResultSerializer,
    ReviewCreateSerializer,
    ReviewListItemSerializer,
    ReviewListQuerySerializer,
    ReviewSerializer,
    VoteRequestSerializer,
)
from review.services import ReviewService

logger = logging.getLogger(__name__)


def _payload(data):
    # form-encoded 요청(QueryDict)은 key 당 마지막 값만 사용
    return data.dict() if hasattr(data, "dict") else data


class CompanyReviewListCreateView(APIView):
    """
    회사 리뷰 목록/작성

    비즈니스 로직은 ReviewService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "page", OpenApiTypes.INT, description="페이지 (1부터)"
            ),
            OpenApiParameter(
                "page_size", OpenApiTypes.INT, description="페이지 크기"
            ),
            OpenApiParameter(
                "limit", OpenApiTypes.INT, description="page_size 별칭"
            ),
            OpenApiParameter(
                "sort",
                OpenApiTypes.STR,
                description="newest | most-helpful | highest-rating | lowest-rating",
            ),
        ],
        responses={200: OpenApiTypes.OBJECT},
        summary="List company reviews",
    )
    def get(self, request, company_id: int):
        """
        승인된 리뷰 목록 조회

        GET /api/v1/companies/<company_id>/reviews/
        """
        query = ReviewListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error_response(query.errors)

        try:
            viewer_id = request.user.id if request.user.is_authenticated else None
            result = ReviewService.list_company_reviews(
                company_id=company_id,
                page=query.validated_data["page"],
                page_size=query.validated_data.get("page_size"),
                sort=query.validated_data.get("sort"),
                viewer_id=viewer_id,
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            page = result.value
            return success_response(
                ReviewListItemSerializer(page.reviews, many=True).data,
                pagination=PaginationSerializer(page.pagination).data,
                average_rating=page.average_rating,
                total_reviews=page.total_reviews,
                distribution=page.distribution,
            )
        except Exception as e:
            logger.error(
                f"Failed to list reviews for company {company_id}: {str(e)}",
                exc_info=True,
            )
            return server_error_response("Failed to retrieve reviews")

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={201: ReviewSerializer},
        summary="Submit company review",
        description="재직 인증 사용자의 리뷰는 바로 공개되고, 그 외에는 승인 대기 상태가 됩니다.",
    )
    def post(self, request, company_id: int):
        """
        리뷰 작성

        POST /api/v1/companies/<company_id>/reviews/
        """
        try:
            result = ReviewService.submit_review(
                company_id=company_id,
                author_id=request.user.id,
                payload=_payload(request.data),
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(
                ReviewSerializer(result.value.review).data,
                message=result.value.message,
                status_code=status.HTTP_201_CREATED,
                published=result.value.published,
            )
        except Exception as e:
            logger.error(
                f"Failed to submit review for company {company_id}: {str(e)}",
                exc_info=True,
            )
            return server_error_response("Failed to submit review")


class ReviewVoteView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=VoteRequestSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="Vote on a review",
        description="action=helpful 은 도움돼요 토글, action=report 는 신고입니다.",
    )
    def post(self, request, review_id: int):
        """
        도움돼요 토글 / 신고

        POST /api/v1/reviews/<review_id>/vote/
        """
        serializer = VoteRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        action = serializer.validated_data["action"]
        try:
            result = ReviewService.vote(
                review_id=review_id, user_id=request.user.id, action=action
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            if isinstance(result.value, ReportResult):
                return success_response(
                    ReportResultSerializer(result.value).data,
                    message=messages.REPORTED,
                )
            return success_response(
                HelpfulToggleSerializer(result.value).data,
                message=result.value.message,
            )
        except Exception as e:
            logger.error(
                f"Failed to {action} review {review_id}: {str(e)}", exc_info=True
            )
            return server_error_response("Failed to process vote")
