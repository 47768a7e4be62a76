from __future__ import annotations

from enum import Enum


class ReviewSort(str, Enum):
    NEWEST = "newest"
    MOST_HELPFUL = "most-helpful"
    HIGHEST_RATING = "highest-rating"
    LOWEST_RATING = "lowest-rating"


DEFAULT_SORT = ReviewSort.NEWEST

# 프론트엔드 기존 파라미터(-createdAt, helpful 등) 호환
SORT_ALIASES: dict[str, ReviewSort] = {
    "recent": ReviewSort.NEWEST,
    "-createdAt": ReviewSort.NEWEST,
    "helpful": ReviewSort.MOST_HELPFUL,
    "-helpfulCount": ReviewSort.MOST_HELPFUL,
    "highest": ReviewSort.HIGHEST_RATING,
    "-rating": ReviewSort.HIGHEST_RATING,
    "lowest": ReviewSort.LOWEST_RATING,
    "rating": ReviewSort.LOWEST_RATING,
}

# 동률은 항상 최신순(created_at desc) → id desc 로 고정
_TIE_BREAKERS: tuple[str, ...] = ("-created_at", "-id")

SORT_ORDERINGS: dict[ReviewSort, tuple[str, ...]] = {
    ReviewSort.NEWEST: _TIE_BREAKERS,
    ReviewSort.MOST_HELPFUL: ("-helpful_count",) + _TIE_BREAKERS,
    ReviewSort.HIGHEST_RATING: ("-rating",) + _TIE_BREAKERS,
    ReviewSort.LOWEST_RATING: ("rating",) + _TIE_BREAKERS,
}


def parse_sort(value: str | None) -> ReviewSort | None:
    """알 수 없는 값이면 None."""
    if not value:
        return DEFAULT_SORT
    if value in SORT_ALIASES:
        return SORT_ALIASES[value]
    try:
        return ReviewSort(value)
    except ValueError:
        return None
