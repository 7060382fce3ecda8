from typing import Iterable, Mapping

from ward_news.models.vitals import RECORD_FIELDS
from ward_news.utils.parsing import trim_text


def to_record(raw: Mapping[str, object]) -> dict:
    """상위 페이로드에서 측정 기록 매핑 추출

    알려진 항목만 가져오며 빈 문자열은 None(누락)으로 바꾼다.

    Args:
        raw: 폼 또는 API 원본 페이로드

    Returns:
        측정 기록 매핑
    """
    return {field: trim_text(raw[field]) for field in RECORD_FIELDS if field in raw}


def from_observations(observations: Iterable[Mapping[str, object]]) -> dict:
    """관찰 행 목록으로 측정 기록 매핑 구성

    Args:
        observations: name/value 키를 가진 관찰 행 목록

    Returns:
        측정 기록 매핑
    """
    raw: dict = {}
    for observation in observations:
        name = str(observation.get("name", "")).strip()
        if name not in RECORD_FIELDS:
            continue
        raw[name] = observation.get("value")
    return to_record(raw)
