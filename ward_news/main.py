"""측정 기록 파일의 NEWS 일괄 계산 CLI

입력 파일은 YAML 또는 JSON 목록이며 각 항목은 report_id와 생체신호
항목을 가진다. 결과는 JSON으로 표준 출력에 쓴다.

Usage:
    ward-news reports.yaml
    ward-news reports.json --indent 2

Exit Codes:
    0 - 모든 기록 계산 성공
    1 - 하나 이상의 기록 계산 실패
    2 - 입력 파일 오류
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml

from ward_news.core.config import get_settings, load_scoring_config
from ward_news.core.logger import log_event
from ward_news.core.logging import configure_logging
from ward_news.core.pipeline import score_reports
from ward_news.transforms.inbound import to_record
from ward_news.transforms.outbound import result_to_payload


def load_reports(path: Path) -> list[tuple[str, dict]]:
    """입력 파일에서 (측정 기록 식별자, 측정 기록) 목록 로드

    Args:
        path: YAML 또는 JSON 파일 경로

    Returns:
        측정 기록 목록

    Raises:
        ValueError: 파일 형식 오류 시
    """
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or []
    if not isinstance(data, list):
        raise ValueError("입력은 측정 기록 목록이어야 함")
    reports = []
    for index, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"{index}번째 항목이 매핑이 아님")
        report_id = str(item.get("report_id", index))
        reports.append((report_id, to_record(item)))
    return reports


def main(args: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ward-news",
        description="측정 기록 파일의 NEWS 점수를 계산",
    )
    parser.add_argument("path", type=Path, help="측정 기록 목록 파일(YAML/JSON)")
    parser.add_argument("--indent", type=int, default=None, help="JSON 들여쓰기")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {settings.version}"
    )
    parsed_args = parser.parse_args(args)

    configure_logging(settings.log_level)
    try:
        reports = load_reports(parsed_args.path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        log_event("input_failed", "ERROR", "-", "load", str(exc))
        return 2

    results = score_reports(reports, load_scoring_config())
    payload = [result_to_payload(result) for result in results]
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=parsed_args.indent))
    sys.stdout.write("\n")
    return 1 if any(result.status == "failed" for result in results) else 0


if __name__ == "__main__":
    sys.exit(main())
