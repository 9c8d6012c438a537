"""
core/tools/time/utils.py - 날짜/시간 관련 유틸리티 함수들
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytz  # type: ignore[import-untyped]

from core.config import get_timezone, settings


def _resolve_tz(tz_name: str | None):
    """타임존 이름을 pytz 타임존으로 변환 (None이면 설정값)"""
    return pytz.timezone(tz_name or get_timezone())


def format_epoch(
    epoch: int | float | str,
    tz_name: str | None = None,
    output_format: str = settings.DATE_FORMAT,
) -> str:
    """유닉스 타임스탬프를 사람이 읽을 수 있는 문자열로 변환합니다.

    Args:
        epoch: 유닉스 타임스탬프 (초). API가 문자열로 줄 수도 있음
        tz_name: 표시 타임존 (기본: ACQUIA_TIMEZONE 또는 UTC)
        output_format: 출력 형식 (기본: "%Y-%m-%d %H:%M:%S")

    Returns:
        str: 포맷된 날짜 문자열 (예: "2024-01-01 00:00:00")
    """
    dt = datetime.fromtimestamp(int(float(epoch)), tz=timezone.utc)
    return dt.astimezone(_resolve_tz(tz_name)).strftime(output_format)


def to_iso8601(dt: datetime) -> str:
    """datetime을 Cloud API가 받는 ISO-8601 문자열로 변환합니다.

    타임존 정보가 없는 datetime은 UTC로 간주합니다.

    Returns:
        str: 예) "2024-01-01T00:00:00+0000"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S%z")


def parse_datetime(value: str, tz_name: str | None = None) -> datetime:
    """ISO-8601 형식 문자열을 타임존 정보가 있는 datetime으로 파싱합니다.

    "2024-01-01", "2024-01-01T09:00:00", "2024-01-01T09:00:00+09:00" 모두 허용.
    타임존이 없으면 tz_name(기본: 설정 타임존) 기준으로 해석합니다.

    Raises:
        ValueError: 파싱할 수 없는 형식
    """
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = _resolve_tz(tz_name).localize(dt)
    return dt


def get_reporting_window(
    days: int = settings.DEFAULT_REPORTING_DAYS,
    end: datetime | None = None,
) -> tuple[datetime, datetime]:
    """리포트 기간 (start, end) 반환

    Args:
        days: 기간 (일), end로부터 거슬러 올라감
        end: 종료 시각 (기본: 현재 UTC)

    Returns:
        (start, end) 튜플
    """
    if end is None:
        end = datetime.now(timezone.utc)
    return end - timedelta(days=days), end
