from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

STARS: tuple[int, ...] = (1, 2, 3, 4, 5)


def empty_distribution() -> dict[str, int]:
    return {str(star): 0 for star in STARS}


@dataclass(frozen=True, slots=True)
class RatingAggregate:
    """
    승인된 리뷰 집합의 평점 요약.

    - average: 평균(반올림하지 않은 float, 리뷰가 없으면 0.0)
    - count: 승인된 리뷰 수
    - distribution: 별점(1~5)별 리뷰 수, 키는 "1".."5" 문자열
    """

    average: float = 0.0
    count: int = 0
    distribution: dict[str, int] = field(default_factory=empty_distribution)

    def as_dict(self) -> dict:
        return {
            "average": self.average,
            "count": self.count,
            "distribution": dict(self.distribution),
        }


def aggregate_from_counts(counts: Mapping[int, int]) -> RatingAggregate:
    """
    별점별 개수 {rating: n} 로부터 집계값을 계산합니다.

    범위를 벗어난 별점이 섞여 있으면 데이터 무결성 오류이므로 ValueError.
    """
    distribution = empty_distribution()
    total = 0
    weighted = 0
    for rating, n in counts.items():
        star = int(rating)
        if star not in STARS:
            raise ValueError(f"rating out of range: {rating}")
        if n <= 0:
            continue
        distribution[str(star)] += int(n)
        total += int(n)
        weighted += star * int(n)

    if total == 0:
        return RatingAggregate()
    return RatingAggregate(
        average=weighted / total, count=total, distribution=distribution
    )
