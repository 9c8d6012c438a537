"""Acquia Cloud 관련 공유 유틸리티.

하위 모듈:
- cloud_api: Cloud API v2 클라이언트 (OAuth2 인증, GET 요청)
- metrics: stackmetrics 시계열 조회
"""

from .cloud_api import CloudApiClient
from .metrics import (
    STACK_METRICS,
    CloudApiMetricsFetcher,
    MetricsFetcher,
    build_metric_filter,
    extract_items,
    validate_metrics,
)

__all__ = [
    "CloudApiClient",
    "CloudApiMetricsFetcher",
    "MetricsFetcher",
    "STACK_METRICS",
    "build_metric_filter",
    "extract_items",
    "validate_metrics",
]
