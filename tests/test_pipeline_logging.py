import logging

from ward_news.core.logger import LOGGER_NAME
from ward_news.core.pipeline import score_report, score_reports
from ward_news.transforms.outbound import result_to_payload


def test_score_report_ok(normal_record, config, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    result = score_report("R1", normal_record, config)
    assert result.status == "ok"
    assert result.score == 0
    assert result.breakdown.respiration == 0
    events = [record.event for record in caplog.records]
    assert "score_complete" in events


def test_score_report_failure_logs_error_code(normal_record, config, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    result = score_report("R2", {**normal_record, "respiratory_rate": -5}, config)
    assert result.status == "failed"
    assert result.score is None
    assert result.error_code == "NEWS_RANGE_001"
    failed = [record for record in caplog.records if record.event == "score_failed"]
    assert len(failed) == 1
    assert failed[0].report_id == "R2"
    assert failed[0].error_code == "NEWS_RANGE_001"
    assert failed[0].levelno == logging.WARNING


def test_score_reports_keeps_order_and_isolates_failures(normal_record, config, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    reports = [
        ("R1", normal_record),
        ("R2", {"heart_rate": 80}),
        ("R3", {**normal_record, "heart_rate": 135}),
    ]
    results = score_reports(reports, config)
    assert [result.report_id for result in results] == ["R1", "R2", "R3"]
    assert [result.status for result in results] == ["ok", "failed", "ok"]
    assert results[1].error_code == "NEWS_VALID_001"
    assert results[2].score == 1
    batch = [record for record in caplog.records if record.event == "batch_complete"]
    assert batch[0].record_count == 3


def test_result_to_payload(normal_record, config):
    payload = result_to_payload(score_report("R1", normal_record, config))
    assert payload["status"] == "ok"
    assert payload["breakdown"]["supplementalOxygen"] == 0
    failed = result_to_payload(score_report("R2", {}, config))
    assert failed["breakdown"] is None
    assert failed["error_code"] == "NEWS_VALID_001"
