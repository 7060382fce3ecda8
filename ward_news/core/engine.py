"""NEWS(National Early Warning Score) 계산 엔진

요청마다 create()로 새 엔진을 만들어 사용한다. 엔진은 생성 시점의
측정 기록만 보관하며 계산 결과를 캐시하지 않는다.
"""

from __future__ import annotations

import math
from typing import Mapping

from ward_news.core.bands import BANDS, classify
from ward_news.core.config import ScoringConfig, load_scoring_config
from ward_news.core.errors import RangeError, ValidationError
from ward_news.models.score import ScoreBreakdown
from ward_news.models.vitals import RECORD_FIELDS, REQUIRED_FIELDS, VitalSignsRecord
from ward_news.utils.parsing import normalize_text, parse_number

SUPPLEMENTAL_OXYGEN_SCORE = 2
IMPAIRED_CONSCIOUSNESS_SCORE = 3


class ScoreEngine:
    """측정 기록 하나에 대한 NEWS 계산기"""

    __slots__ = ("_record", "_config")

    def __init__(self, record: VitalSignsRecord, config: ScoringConfig) -> None:
        self._record = record
        self._config = config

    @property
    def record(self) -> VitalSignsRecord:
        return self._record

    def compute_breakdown(self) -> ScoreBreakdown:
        """항목별 세부 점수 계산

        Returns:
            세부 점수

        Raises:
            RangeError: 측정값이 어떤 구간에도 속하지 않을 때
        """
        return ScoreBreakdown(
            respiration=self._score_range("respiratory_rate"),
            oxygenation=self._score_range("oxygen_saturation"),
            heart_rate=self._score_range("heart_rate"),
            temperature=self._score_range("body_temperature"),
            blood_pressure=self._score_range("systolic_bp"),
            consciousness=self._score_consciousness(),
            supplemental_oxygen=self._score_supplemental_oxygen(),
        )

    def compute_composite(self) -> int:
        """세부 점수 7개의 평균을 올림한 종합 점수

        Returns:
            종합 점수

        Raises:
            RangeError: 세부 점수 계산 실패 시
        """
        scores = self.compute_breakdown().scores()
        return math.ceil(sum(scores) / len(scores))

    def _score_range(self, parameter: str) -> int:
        raw_value = getattr(self._record, parameter)
        value = parse_number(raw_value)
        if value is None:
            raise RangeError(parameter, raw_value)
        limit = self._config.limit_for(parameter)
        if limit is not None and not limit.low <= value <= limit.high:
            raise RangeError(parameter, raw_value)
        score = classify(value, BANDS[parameter])
        if score is None:
            raise RangeError(parameter, raw_value)
        return score

    def _score_consciousness(self) -> int:
        level = normalize_text(self._record.level_of_consciousness)
        alert_values = {normalize_text(value) for value in self._config.alert_values}
        if level in alert_values:
            return 0
        return IMPAIRED_CONSCIOUSNESS_SCORE

    def _score_supplemental_oxygen(self) -> int:
        value = self._record.supplemental_oxygen
        if value is True:
            return SUPPLEMENTAL_OXYGEN_SCORE
        if isinstance(value, str):
            in_use = {normalize_text(item) for item in self._config.supplemental_oxygen_values}
            if normalize_text(value) in in_use:
                return SUPPLEMENTAL_OXYGEN_SCORE
        return 0


def find_missing(record: Mapping[str, object]) -> list[str]:
    """누락된 필수 항목 목록

    Args:
        record: 측정 기록 매핑

    Returns:
        선언 순서대로 정렬된 누락 항목 이름
    """
    return [field for field in REQUIRED_FIELDS if record.get(field) is None]


def create(
    record: Mapping[str, object], config: ScoringConfig | None = None
) -> ScoreEngine:
    """측정 기록을 검증하고 계산 엔진을 생성

    Args:
        record: 측정 기록 매핑
        config: 점수 계산 설정(기본값: 설정 파일)

    Returns:
        계산 엔진

    Raises:
        ValidationError: 필수 항목 누락 시
    """
    missing = find_missing(record)
    if missing:
        raise ValidationError(missing)
    snapshot = VitalSignsRecord(
        **{field: record[field] for field in RECORD_FIELDS if field in record}
    )
    if config is None:
        config = load_scoring_config()
    return ScoreEngine(snapshot, config)
