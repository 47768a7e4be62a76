from __future__ import annotations

from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)


class ReviewSubmission(BaseModel):
    """리뷰 작성 요청 payload."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    rating: int = Field(ge=1, le=5, description="별점 (1~5)")
    title: str = Field(min_length=3, max_length=100, description="리뷰 제목")
    content: str = Field(min_length=10, max_length=2000, description="리뷰 본문")
    pros: Optional[str] = Field(default=None, max_length=500, description="장점")
    cons: Optional[str] = Field(default=None, max_length=500, description="단점")
    is_anonymous: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_anonymous", "isAnonymous"),
        description="익명 작성 여부",
    )

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value):
        # bool 은 int 의 하위 타입이라 lax 모드에서 1/0 으로 바뀜
        if isinstance(value, bool):
            raise ValueError("Rating must be a number between 1 and 5")
        return value


def validation_error_details(exc: ValidationError) -> dict[str, list[str]]:
    """pydantic 오류를 {field: [messages]} 형태로 변환."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("non_field_errors",)
        field = str(loc[0])
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return details
