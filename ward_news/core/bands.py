"""NEWS 항목별 점수 구간표

각 구간은 (점수, 하한, 상한)이며 경계는 포함한다. None은 해당 방향으로
열린 구간을 뜻하고 허용 범위(ScoringConfig.limits)로 제한된다.
구간은 나열된 순서대로 검사한다.
"""

from __future__ import annotations

from typing import NamedTuple


class Band(NamedTuple):
    score: int
    low: float | None
    high: float | None

    def contains(self, value: float) -> bool:
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True


RESPIRATORY_RATE = (
    Band(0, 12, 20),
    Band(1, 9, 11),
    Band(2, 21, 24),
    Band(3, None, 8),
    Band(3, 25, None),
)

# 누적 임계값, 순서대로 검사
OXYGEN_SATURATION = (
    Band(0, 96, None),
    Band(1, 94, None),
    Band(2, 92, None),
    Band(3, None, 91),
)

HEART_RATE = (
    Band(3, None, 40),
    Band(3, 131, None),
    Band(2, 111, 130),
    Band(1, 41, 50),
    Band(1, 91, 110),
    Band(0, 51, 90),
)

BODY_TEMPERATURE = (
    Band(3, None, 35.0),
    Band(2, 39.1, None),
    Band(1, 35.1, 36.0),
    Band(1, 38.1, 39.0),
    Band(0, 36.1, 38.0),
)

SYSTOLIC_BP = (
    Band(3, None, 90),
    Band(3, 220, None),
    Band(2, 91, 100),
    Band(1, 101, 110),
    Band(0, 111, 219),
)

BANDS = {
    "respiratory_rate": RESPIRATORY_RATE,
    "oxygen_saturation": OXYGEN_SATURATION,
    "heart_rate": HEART_RATE,
    "body_temperature": BODY_TEMPERATURE,
    "systolic_bp": SYSTOLIC_BP,
}


def classify(value: float, bands: tuple[Band, ...]) -> int | None:
    """값이 속한 첫 구간의 점수를 반환

    Args:
        value: 측정값
        bands: 점수 구간표

    Returns:
        점수, 어떤 구간에도 속하지 않으면 None
    """
    for band in bands:
        if band.contains(value):
            return band.score
    return None
