# 평점 집계: 순수 함수 (DB 접근 없음)

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from app.schemas.point import RatingSummary

TWO_PLACES = Decimal("0.01")


def compute_rating_summary(ratings: Iterable[int]) -> RatingSummary:
    """
    평점 목록 → 평균(소수 둘째 자리, 사사오입) + 개수.

    - 2.125 → 2.13 (round()의 banker's rounding 대신 ROUND_HALF_UP)
    - 댓글이 없으면 average_rating=0, comment_count=0
    - 저장/캐시하지 않고 조회·작성·삭제 때마다 새로 계산
    """
    values = list(ratings)
    if not values:
        return RatingSummary(average_rating=0, comment_count=0)
    mean = Decimal(sum(values)) / Decimal(len(values))
    average = float(mean.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))
    return RatingSummary(average_rating=average, comment_count=len(values))
