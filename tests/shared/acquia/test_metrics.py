"""
tests/shared/acquia/test_metrics.py - stackmetrics 조회 테스트
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from conftest import make_response
from core.exceptions import AuditValidationError
from shared.acquia.metrics import (
    STACK_METRICS,
    CloudApiMetricsFetcher,
    build_metric_filter,
    extract_items,
    validate_metrics,
)


class TestBuildMetricFilter:
    """build_metric_filter 함수 테스트"""

    def test_single(self):
        assert build_metric_filter(["web-cpu"]) == "metric:web-cpu"

    def test_multiple_keeps_order(self):
        assert build_metric_filter(["web-memory", "web-cpu"]) == "metric:web-memory,metric:web-cpu"


class TestValidateMetrics:
    """validate_metrics 함수 테스트"""

    @pytest.mark.parametrize(
        "value, type_name",
        [("web-cpu", "Str"), (("web-cpu",), "Tuple"), ({"web-cpu": 1}, "Dict"), (None, "Nonetype"), (1, "Int")],
    )
    def test_non_list(self, value, type_name):
        """list가 아니면 실제 타입을 담아 실패"""
        with pytest.raises(AuditValidationError) as exc_info:
            validate_metrics(value)

        error = exc_info.value
        assert error.field == "metrics"
        assert error.actual_type == type_name
        assert f"{type_name} given" in str(error)

    def test_empty_list(self):
        with pytest.raises(AuditValidationError):
            validate_metrics([])

    def test_valid(self):
        assert validate_metrics(["web-cpu"]) == ["web-cpu"]

    def test_catalogue(self):
        assert "web-cpu" in STACK_METRICS
        assert "varnish-cache-hit-rate" in STACK_METRICS
        assert len(STACK_METRICS) == len(set(STACK_METRICS))


class TestExtractItems:
    """extract_items 함수 테스트"""

    def test_items(self):
        items = [{"metric": "web-cpu", "datapoints": []}]
        assert extract_items(make_response(items)) == items

    def test_malformed_response_raises(self):
        """잘못된 응답은 그대로 예외"""
        with pytest.raises(KeyError):
            extract_items({"items": []})


class TestCloudApiMetricsFetcher:
    """CloudApiMetricsFetcher 테스트"""

    def test_fetch_request(self):
        """경로와 쿼리 파라미터"""
        client = MagicMock()
        client.get.return_value = make_response([])
        fetcher = CloudApiMetricsFetcher(client)

        response = fetcher.fetch(
            "12-abc",
            ["web-cpu", "web-memory"],
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 1, 2, tzinfo=timezone.utc),
        )

        assert response == make_response([])
        client.get.assert_called_once_with(
            "environments/12-abc/metrics/stackmetrics/data",
            params={
                "filter": "metric:web-cpu,metric:web-memory",
                "from": "2024-01-01T00:00:00+0000",
                "to": "2024-01-02T00:00:00+0000",
            },
        )

    def test_non_list_no_request(self):
        """검증 실패 시 네트워크 호출 없음"""
        client = MagicMock()
        fetcher = CloudApiMetricsFetcher(client)

        with pytest.raises(AuditValidationError):
            fetcher.fetch("12-abc", "web-cpu", datetime.now(timezone.utc), datetime.now(timezone.utc))

        client.get.assert_not_called()

    def test_unknown_metric_warns(self, caplog):
        """알 수 없는 메트릭은 경고 후 그대로 요청"""
        client = MagicMock()
        fetcher = CloudApiMetricsFetcher(client)

        with caplog.at_level("WARNING"):
            fetcher.fetch("12-abc", ["web-gpu"], datetime.now(timezone.utc), datetime.now(timezone.utc))

        assert "web-gpu" in caplog.text
        assert client.get.call_args[1]["params"]["filter"] == "metric:web-gpu"

    def test_client_errors_propagate(self):
        client = MagicMock()
        client.get.side_effect = ConnectionError("down")
        fetcher = CloudApiMetricsFetcher(client)

        with pytest.raises(ConnectionError):
            fetcher.fetch("12-abc", ["web-cpu"], datetime.now(timezone.utc), datetime.now(timezone.utc))
