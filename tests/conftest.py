import pytest

from ward_news.core.config import ScoringConfig


@pytest.fixture
def config():
    return ScoringConfig()


@pytest.fixture
def normal_record():
    return {
        "respiratory_rate": 16,
        "oxygen_saturation": 97,
        "heart_rate": 75,
        "body_temperature": 37.0,
        "systolic_bp": 120,
        "level_of_consciousness": "alert",
        "supplemental_oxygen": False,
    }
