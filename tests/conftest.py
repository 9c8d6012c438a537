"""
tests/conftest.py - pytest 공통 픽스처

Cloud API 응답 샘플과 테스트용 ExecutionContext / MetricsFetcher를 제공합니다.

Usage:
    def test_something(exec_context, fake_fetcher):
        result = gather(exec_context, fake_fetcher)
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cli.flow.context import ExecutionContext  # noqa: E402
from core.policy import Policy  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (UTC 고정, 자격 증명 제거)"""
    monkeypatch.delenv("ACQUIA_TIMEZONE", raising=False)
    monkeypatch.delenv("ACQUIA_API_KEY", raising=False)
    monkeypatch.delenv("ACQUIA_API_SECRET", raising=False)
    monkeypatch.delenv("ACQUIA_API_TIMEOUT", raising=False)
    yield


# =============================================================================
# 샘플 데이터
# =============================================================================


def make_item(metric: str, datapoints: List[List[Any]], host: str = None) -> Dict[str, Any]:
    """stackmetrics 응답 항목 생성"""
    item: Dict[str, Any] = {"metric": metric, "datapoints": datapoints}
    if host is not None:
        item["metadata"] = {"host": host}
    return item


def make_response(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """stackmetrics 응답 문서 생성"""
    return {"total": len(items), "_embedded": {"items": items}}


@pytest.fixture
def sample_response():
    """web-cpu / web-memory 두 호스트 응답"""
    return make_response(
        [
            make_item("web-cpu", [[12.5, 1704070800], [20.0, 1704067200]], host="web-1.prod.hosting.acquia.com"),
            make_item("web-cpu", [[30.0, 1704067200]], host="web-2.prod.hosting.acquia.com"),
            make_item("web-memory", [[55.0, 1704067200], [60.0, 1704070800]], host="web-1.prod.hosting.acquia.com"),
        ]
    )


class FakeFetcher:
    """호출 기록을 남기는 MetricsFetcher"""

    def __init__(self, response: Dict[str, Any]):
        self.response = response
        self.calls: List[tuple] = []

    def fetch(self, environment_id, metric_names, start, end):
        self.calls.append((environment_id, list(metric_names), start, end))
        return self.response


@pytest.fixture
def fake_fetcher(sample_response):
    return FakeFetcher(sample_response)


@pytest.fixture
def reporting_window():
    return (
        datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        datetime(2024, 1, 2, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def exec_context(reporting_window):
    """테스트용 ExecutionContext"""
    start, end = reporting_window
    return ExecutionContext(
        environment={"id": "12-abc", "label": "Production"},
        reporting_start=start,
        reporting_end=end,
        policy=Policy(name="test", title="Web Usage"),
    )
