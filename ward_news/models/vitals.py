from typing import Any

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = (
    "respiratory_rate",
    "oxygen_saturation",
    "heart_rate",
    "body_temperature",
    "systolic_bp",
    "level_of_consciousness",
)
OPTIONAL_FIELDS = ("supplemental_oxygen",)
RECORD_FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS


class VitalSignsRecord(BaseModel):
    """생체신호 측정 기록(원본 값 그대로 보관)"""

    model_config = ConfigDict(frozen=True)

    respiratory_rate: Any = Field(..., description="호흡수(회/분)")
    oxygen_saturation: Any = Field(..., description="산소포화도(%)")
    heart_rate: Any = Field(..., description="맥박수(회/분)")
    body_temperature: Any = Field(..., description="체온(섭씨)")
    systolic_bp: Any = Field(..., description="수축기 혈압(mmHg)")
    level_of_consciousness: Any = Field(..., description="의식 수준")
    supplemental_oxygen: Any = Field(default=None, description="보조 산소 사용 여부")
