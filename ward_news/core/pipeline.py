from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Mapping

from ward_news.core.config import ScoringConfig
from ward_news.core.engine import create
from ward_news.core.errors import ScoreError
from ward_news.core.logger import log_event
from ward_news.models.score import ScoreResult


def score_report(
    report_id: str,
    record: Mapping[str, object],
    config: ScoringConfig | None = None,
) -> ScoreResult:
    """측정 기록 하나의 점수를 계산

    Args:
        report_id: 측정 기록 식별자
        record: 측정 기록 매핑
        config: 점수 계산 설정(선택)

    Returns:
        개별 결과
    """
    try:
        engine = create(record, config)
        breakdown = engine.compute_breakdown()
        score = engine.compute_composite()
    except ScoreError as exc:
        log_event(
            "score_failed",
            "WARNING",
            report_id,
            "score",
            exc.message,
            error_code=exc.code,
        )
        return ScoreResult(
            report_id=report_id,
            status="failed",
            error_code=exc.code,
            message=exc.message,
        )
    log_event("score_complete", "INFO", report_id, "score", f"NEWS {score}")
    return ScoreResult(
        report_id=report_id, status="ok", score=score, breakdown=breakdown
    )


def score_reports(
    reports: Iterable[tuple[str, Mapping[str, object]]],
    config: ScoringConfig | None = None,
) -> list[ScoreResult]:
    """여러 측정 기록을 독립적으로 계산

    Args:
        reports: (측정 기록 식별자, 측정 기록) 목록
        config: 점수 계산 설정(선택)

    Returns:
        입력 순서대로의 결과 목록
    """
    start = datetime.now(timezone.utc)
    results = [score_report(report_id, record, config) for report_id, record in reports]
    failed = sum(1 for result in results if result.status == "failed")
    log_event(
        "batch_complete",
        "INFO",
        "-",
        "batch",
        f"일괄 계산 완료 (실패 {failed}건)",
        record_count=len(results),
        duration_ms=int((datetime.now(timezone.utc) - start).total_seconds() * 1000),
    )
    return results
