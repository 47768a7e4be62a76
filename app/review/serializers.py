from rest_framework import serializers
from review.domain.sorting import ReviewSort
from review.services import VOTE_ACTIONS


class EnumValueField(serializers.Field):
    """Enum 멤버를 .value 로 직렬화 (읽기 전용)."""

    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return getattr(value, "value", value)


class ReviewCreateSerializer(serializers.Serializer):
    """
    리뷰 작성 요청 스키마 (문서용).
    실제 검증은 review.dtos.ReviewSubmission 에서 수행합니다.
    """

    rating = serializers.IntegerField(min_value=1, max_value=5)
    title = serializers.CharField(min_length=3, max_length=100)
    content = serializers.CharField(min_length=10, max_length=2000)
    pros = serializers.CharField(max_length=500, required=False, allow_blank=True)
    cons = serializers.CharField(max_length=500, required=False, allow_blank=True)
    is_anonymous = serializers.BooleanField(required=False, default=False)


class ReviewSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    company_id = serializers.IntegerField()
    rating = serializers.IntegerField()
    title = serializers.CharField()
    content = serializers.CharField()
    pros = serializers.CharField()
    cons = serializers.CharField()
    is_anonymous = serializers.BooleanField()
    is_verified = serializers.BooleanField()
    status = EnumValueField()
    report_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ReviewAuthorSerializer(serializers.Serializer):
    id = serializers.IntegerField(allow_null=True)
    name = serializers.CharField()
    avatar = serializers.CharField(allow_null=True)
    title = serializers.CharField(allow_null=True)


class ReviewListItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    company_id = serializers.IntegerField()
    rating = serializers.IntegerField()
    title = serializers.CharField()
    content = serializers.CharField()
    pros = serializers.CharField()
    cons = serializers.CharField()
    is_anonymous = serializers.BooleanField()
    is_verified = serializers.BooleanField()
    helpful_count = serializers.IntegerField()
    is_helpful = serializers.BooleanField()
    author = ReviewAuthorSerializer()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class ReviewListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    page_size = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(
        min_value=1, required=False, help_text="page_size 의 프론트엔드 별칭"
    )
    sort = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text=f"{', '.join(s.value for s in ReviewSort)} (기본 newest)",
    )

    def validate(self, attrs):
        # page_size 가 함께 오면 page_size 우선
        limit = attrs.pop("limit", None)
        if limit is not None:
            attrs.setdefault("page_size", limit)
        return attrs


class VoteRequestSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=list(VOTE_ACTIONS))


class HelpfulToggleSerializer(serializers.Serializer):
    is_helpful = serializers.BooleanField()
    helpful_count = serializers.IntegerField()


class ReportResultSerializer(serializers.Serializer):
    report_count = serializers.IntegerField()
    status = EnumValueField()
