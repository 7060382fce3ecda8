from __future__ import annotations

import logging

LOGGER_NAME = "ward-news"


def log_event(
    event: str,
    level: str,
    report_id: str,
    stage: str,
    message: str,
    error_code: str | None = None,
    duration_ms: int | None = None,
    record_count: int | None = None,
) -> None:
    """이벤트를 표준 로깅으로 기록

    Args:
        event: 이벤트 이름
        level: 로깅 레벨 문자열
        report_id: 측정 기록 식별자
        stage: 처리 단계
        message: 로그 메시지
        error_code: 에러 코드(선택)
        duration_ms: 처리 시간(밀리초, 선택)
        record_count: 레코드 수(선택)
    """
    logger = logging.getLogger(LOGGER_NAME)
    extra = {
        "event": event,
        "report_id": report_id,
        "stage": stage,
        "error_code": error_code,
        "duration_ms": duration_ms,
        "record_count": record_count,
    }
    logger.log(getattr(logging, level.upper(), logging.INFO), message, extra=extra)
