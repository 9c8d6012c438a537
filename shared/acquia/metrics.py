"""
shared/acquia/metrics.py - Stack Metrics 조회

Cloud API의 stackmetrics 엔드포인트에서 환경별 인프라 메트릭 시계열을 조회합니다.

    GET environments/{envId}/metrics/stackmetrics/data
        ?filter=metric:web-cpu,metric:web-memory
        &from=2024-01-01T00:00:00+0000
        &to=2024-01-02T00:00:00+0000

응답 형식:
    {
        "_embedded": {
            "items": [
                {
                    "metric": "web-cpu",
                    "metadata": {"host": "web-1234.prod.hosting.acquia.com"},
                    "datapoints": [[12.5, 1704067200], ...]   # [value, epoch]
                },
                ...
            ]
        }
    }
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from core.exceptions import AuditValidationError
from core.tools.time.utils import to_iso8601

if TYPE_CHECKING:
    from .cloud_api import CloudApiClient

logger = logging.getLogger(__name__)

METRIC_FILTER_PREFIX = "metric:"

# 조회 가능한 메트릭 목록
STACK_METRICS: tuple[str, ...] = (
    "apache-requests",
    "bal-cpu",
    "bal-memory",
    "cron-memory",
    "db-cpu",
    "db-disk-size",
    "db-disk-usage",
    "db-memory",
    "file-disk-size",
    "file-cpu",
    "file-disk-usage",
    "file-memory",
    "http-2xx",
    "http-3xx",
    "http-4xx",
    "http-5xx",
    "mysql-slow-query-count",
    "nginx-requests",
    "out-of-memory",
    "php-proc-max-reached-site",
    "php-proc-max-reached-total",
    "php-proc-site",
    "php-proc-total",
    "varnish-cache-hit-rate",
    "varnish-requests",
    "web-cpu",
    "web-memory",
)


class MetricsFetcher(Protocol):
    """메트릭 API 추상화

    fetch()는 원본 응답 문서를 반환합니다. 항목 목록은 extract_items()로 꺼냅니다.
    """

    def fetch(
        self,
        environment_id: str,
        metric_names: list[str],
        start: datetime,
        end: datetime,
    ) -> dict[str, Any]: ...


def validate_metrics(metrics: Any) -> list[str]:
    """metrics 파라미터 검증

    Raises:
        AuditValidationError: list가 아니거나 비어 있는 경우
    """
    if not isinstance(metrics, list):
        raise AuditValidationError("metrics", metrics, "list")
    if not metrics:
        raise AuditValidationError(
            "metrics", metrics, "non-empty list", message="Metrics parameter must not be empty."
        )

    return metrics


def build_metric_filter(metrics: list[str]) -> str:
    """filter 쿼리 문자열 생성 ("metric:a,metric:b")"""
    return ",".join(f"{METRIC_FILTER_PREFIX}{metric}" for metric in metrics)


def extract_items(response: dict[str, Any]) -> list[dict[str, Any]]:
    """응답에서 시계열 항목 목록 추출"""
    items: list[dict[str, Any]] = response["_embedded"]["items"]
    return items


class CloudApiMetricsFetcher:
    """CloudApiClient 기반 MetricsFetcher 구현"""

    def __init__(self, client: CloudApiClient) -> None:
        self._client = client

    def fetch(
        self,
        environment_id: str,
        metric_names: list[str],
        start: datetime,
        end: datetime,
    ) -> dict[str, Any]:
        """stackmetrics 데이터 조회

        Args:
            environment_id: 환경 ID
            metric_names: 메트릭 이름 목록
            start: 리포트 기간 시작
            end: 리포트 기간 종료

        Returns:
            API 응답 원본
        """
        metric_names = validate_metrics(metric_names)
        unknown = [m for m in metric_names if m not in STACK_METRICS]
        if unknown:
            logger.warning("알 수 없는 메트릭: %s", ", ".join(map(str, unknown)))

        params = {
            "filter": build_metric_filter(metric_names),
            "from": to_iso8601(start),
            "to": to_iso8601(end),
        }
        logger.info("stackmetrics 조회: env=%s metrics=%s", environment_id, params["filter"])
        return self._client.get(f"environments/{environment_id}/metrics/stackmetrics/data", params=params)
