from company.models import Company
from rest_framework import serializers


class CompanyRatingSerializer(serializers.Serializer):
    average = serializers.FloatField(source="rating_average")
    count = serializers.IntegerField(source="rating_count")
    distribution = serializers.DictField(
        source="rating_distribution", child=serializers.IntegerField()
    )
    updated_at = serializers.DateTimeField(source="rating_updated_at", allow_null=True)


class CompanySerializer(serializers.ModelSerializer):
    rating = CompanyRatingSerializer(source="*", read_only=True)

    class Meta:
        model = Company
        fields = [
            "id",
            "name",
            "slug",
            "industry",
            "location",
            "website",
            "description",
            "rating",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
