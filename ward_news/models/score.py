from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScoreBreakdown(BaseModel):
    """항목별 NEWS 세부 점수"""

    model_config = ConfigDict(frozen=True)

    respiration: int = Field(..., ge=0, le=3, description="호흡수 점수")
    oxygenation: int = Field(..., ge=0, le=3, description="산소포화도 점수")
    heart_rate: int = Field(
        ..., ge=0, le=3, serialization_alias="heartRate", description="맥박수 점수"
    )
    temperature: int = Field(..., ge=0, le=3, description="체온 점수")
    blood_pressure: int = Field(
        ..., ge=0, le=3, serialization_alias="bloodPressure", description="수축기 혈압 점수"
    )
    consciousness: int = Field(..., ge=0, le=3, description="의식 수준 점수")
    supplemental_oxygen: int = Field(
        ...,
        ge=0,
        le=3,
        serialization_alias="supplementalOxygen",
        description="보조 산소 점수",
    )

    def scores(self) -> list[int]:
        """선언 순서대로 세부 점수 목록을 반환"""
        return [getattr(self, name) for name in type(self).model_fields]

    def as_dict(self) -> dict[str, int]:
        """camelCase 키의 순서 있는 딕셔너리로 변환"""
        return self.model_dump(by_alias=True)


class ScoreResult(BaseModel):
    """일괄 계산의 개별 결과"""

    report_id: str = Field(..., description="측정 기록 식별자")
    status: Literal["ok", "failed"] = Field(..., description="처리 상태")
    score: int | None = Field(default=None, description="종합 점수")
    breakdown: ScoreBreakdown | None = Field(default=None, description="세부 점수")
    error_code: str | None = Field(default=None, description="에러 코드")
    message: str | None = Field(default=None, description="에러 메시지")
