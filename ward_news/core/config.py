from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수에서 애플리케이션 설정을 로드"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    version: str = "0.1.0"
    log_level: str = "INFO"
    scoring_config_path: str = "scoring.yaml"


class ParameterLimit(BaseModel):
    """측정 항목의 허용 범위(생리적 한계)"""

    low: float
    high: float


def _default_limits() -> dict[str, ParameterLimit]:
    return {
        "respiratory_rate": ParameterLimit(low=0, high=80),
        "oxygen_saturation": ParameterLimit(low=0, high=100),
        "heart_rate": ParameterLimit(low=0, high=300),
        "body_temperature": ParameterLimit(low=25.0, high=45.0),
        "systolic_bp": ParameterLimit(low=0, high=300),
    }


class ScoringConfig(BaseModel):
    """점수 계산 설정"""

    alert_values: list[str] = Field(default_factory=lambda: ["alert", "A"])
    supplemental_oxygen_values: list[str] = Field(default_factory=lambda: ["on"])
    limits: dict[str, ParameterLimit] = Field(default_factory=_default_limits)

    def limit_for(self, parameter: str) -> ParameterLimit | None:
        """항목의 허용 범위 조회

        Args:
            parameter: 측정 항목 이름

        Returns:
            허용 범위 또는 None
        """
        return self.limits.get(parameter)


@lru_cache
def get_settings() -> Settings:
    """캐시된 설정 인스턴스를 반환"""
    return Settings()


@lru_cache
def load_scoring_config() -> ScoringConfig:
    """설정 파일(YAML)에서 점수 계산 설정 로드

    파일이 없으면 기본값을 사용한다.

    Returns:
        점수 계산 설정 인스턴스
    """
    settings = get_settings()
    path = Path(settings.scoring_config_path)
    if not path.exists():
        return ScoringConfig()
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    limits = data.get("limits")
    if limits:
        # 일부 항목만 지정한 경우 나머지는 기본값 유지
        data["limits"] = {**_default_limits(), **limits}
    return ScoringConfig(**data)


def reload_scoring_config() -> ScoringConfig:
    """설정 캐시를 초기화하고 다시 로드

    Returns:
        점수 계산 설정 인스턴스
    """
    load_scoring_config.cache_clear()
    return load_scoring_config()
