from __future__ import annotations

import math


def parse_number(value: object) -> float | None:
    """값을 유한한 실수로 파싱

    불리언, 숫자가 아닌 문자열, NaN, 무한대는 파싱 실패로 본다.

    Args:
        value: 원본 값

    Returns:
        파싱된 실수 값 또는 None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        if text == "":
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def normalize_text(value: object) -> str:
    """비교용 문자열 정규화

    Args:
        value: 원본 값

    Returns:
        앞뒤 공백을 제거한 소문자 문자열
    """
    if value is None:
        return ""
    return str(value).strip().lower()


def trim_text(value: object) -> object:
    """문자열이면 공백 정리, 빈 문자열은 None

    Args:
        value: 원본 값

    Returns:
        정리된 값
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if text == "":
        return None
    return text
