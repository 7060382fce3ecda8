import logging

_EVENT_DEFAULTS = {
    "event": "system",
    "report_id": "-",
    "stage": "-",
    "error_code": None,
    "duration_ms": None,
    "record_count": None,
}


class EventFormatter(logging.Formatter):
    """log_event 추가 필드를 key=value 형식으로 출력하는 포매터

    error_code, duration_ms, record_count는 값이 있을 때만 붙인다.
    """

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)s %(name)s "
            "event=%(event)s report_id=%(report_id)s stage=%(stage)s %(message)s"
        )

    def format(self, record: logging.LogRecord) -> str:
        for key, default in _EVENT_DEFAULTS.items():
            if getattr(record, key, None) is None:
                setattr(record, key, default)
        line = super().format(record)
        details = [
            f"{key}={getattr(record, key)}"
            for key in ("error_code", "duration_ms", "record_count")
            if getattr(record, key) is not None
        ]
        if details:
            line = f"{line} {' '.join(details)}"
        return line


def configure_logging(level: str) -> None:
    """애플리케이션 로깅을 설정

    Args:
        level: 로깅 레벨 문자열
    """
    handler = logging.StreamHandler()
    handler.setFormatter(EventFormatter())
    logging.basicConfig(level=level.upper(), handlers=[handler])
