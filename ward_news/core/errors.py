class ScoreError(Exception):
    """점수 계산 예외의 기본 클래스"""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ValidationError(ScoreError):
    """필수 생체신호 항목이 누락된 경우 발생"""

    def __init__(self, missing: list[str]) -> None:
        super().__init__("NEWS_VALID_001", f"필수 항목 누락: {', '.join(missing)}")
        self.missing = list(missing)


class RangeError(ScoreError):
    """측정값이 어떤 점수 구간에도 속하지 않을 때 발생"""

    def __init__(self, parameter: str, raw_value: object) -> None:
        super().__init__("NEWS_RANGE_001", f"{parameter}: 범위를 벗어난 값: {raw_value!r}")
        self.parameter = parameter
        self.raw_value = raw_value
