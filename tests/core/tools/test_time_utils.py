# tests/core/tools/test_time_utils.py
"""
core/tools/time/utils.py 단위 테스트
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.tools.time.utils import format_epoch, get_reporting_window, parse_datetime, to_iso8601


class TestFormatEpoch:
    """format_epoch 함수 테스트"""

    def test_utc_default(self):
        assert format_epoch(0) == "1970-01-01 00:00:00"
        assert format_epoch(1704067200) == "2024-01-01 00:00:00"

    def test_string_epoch(self):
        assert format_epoch("1000") == "1970-01-01 00:16:40"

    def test_timezone(self):
        assert format_epoch(1704067200, tz_name="Asia/Seoul") == "2024-01-01 09:00:00"

    def test_env_timezone(self, monkeypatch):
        monkeypatch.setenv("ACQUIA_TIMEZONE", "America/New_York")
        assert format_epoch(1704067200) == "2023-12-31 19:00:00"

    def test_output_format(self):
        assert format_epoch(1704067200, output_format="%Y/%m/%d") == "2024/01/01"


class TestToIso8601:
    """to_iso8601 함수 테스트"""

    def test_aware(self):
        dt = datetime(2024, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        assert to_iso8601(dt) == "2024-01-01T09:00:00+0900"

    def test_naive_is_utc(self):
        assert to_iso8601(datetime(2024, 1, 1)) == "2024-01-01T00:00:00+0000"


class TestParseDatetime:
    """parse_datetime 함수 테스트"""

    def test_date_only(self):
        dt = parse_datetime("2024-01-01")
        assert dt == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_zulu(self):
        assert parse_datetime("2024-01-01T10:00:00Z") == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)

    def test_naive_uses_timezone(self):
        dt = parse_datetime("2024-01-01T09:00:00", tz_name="Asia/Seoul")
        assert dt.astimezone(timezone.utc) == datetime(2024, 1, 1, 0, tzinfo=timezone.utc)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_datetime("yesterday")


class TestGetReportingWindow:
    """get_reporting_window 함수 테스트"""

    def test_explicit_end(self):
        end = datetime(2024, 1, 8, tzinfo=timezone.utc)
        start, actual_end = get_reporting_window(7, end)
        assert actual_end == end
        assert start == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_default_end_is_now(self):
        start, end = get_reporting_window()
        assert end.tzinfo is not None
        assert end - start == timedelta(days=1)
