import json
import logging

import pytest

from ward_news.core.config import get_settings, load_scoring_config
from ward_news.main import main


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("SCORING_CONFIG_PATH", str(tmp_path / "absent.yaml"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    load_scoring_config.cache_clear()
    yield
    get_settings.cache_clear()
    load_scoring_config.cache_clear()


def test_main_scores_reports(tmp_path, capsys):
    path = tmp_path / "reports.yaml"
    path.write_text(
        "- report_id: R1\n"
        "  respiratory_rate: 16\n"
        "  oxygen_saturation: 97\n"
        "  heart_rate: 75\n"
        "  body_temperature: 37.0\n"
        "  systolic_bp: 120\n"
        "  level_of_consciousness: alert\n",
        encoding="utf-8",
    )
    assert main([str(path)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["report_id"] == "R1"
    assert payload[0]["score"] == 0
    assert logging.getLogger().level == logging.WARNING


def test_main_reports_failures(tmp_path, capsys):
    path = tmp_path / "reports.json"
    path.write_text(json.dumps([{"report_id": "R2", "heart_rate": 80}]), encoding="utf-8")
    assert main([str(path)]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["status"] == "failed"
    assert payload[0]["error_code"] == "NEWS_VALID_001"


def test_main_rejects_non_list_input(tmp_path):
    path = tmp_path / "reports.yaml"
    path.write_text("respiratory_rate: 16\n", encoding="utf-8")
    assert main([str(path)]) == 2


def test_main_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert get_settings().version in capsys.readouterr().out
