from ward_news.models.score import ScoreBreakdown, ScoreResult


def to_payload(breakdown: ScoreBreakdown, score: int) -> dict:
    """계산 결과를 응답 페이로드로 변환

    Args:
        breakdown: 세부 점수
        score: 종합 점수

    Returns:
        응답 페이로드 딕셔너리
    """
    return {"breakdown": breakdown.as_dict(), "score": score}


def result_to_payload(result: ScoreResult) -> dict:
    """일괄 계산 결과를 응답 페이로드로 변환

    Args:
        result: 개별 결과

    Returns:
        응답 페이로드 딕셔너리
    """
    payload = result.model_dump(by_alias=True, exclude={"breakdown"})
    payload["breakdown"] = result.breakdown.as_dict() if result.breakdown else None
    return payload
