"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI output and error messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # run
    # =========================================================================
    "fetching": {
        "ko": "메트릭 조회 중: {env} ({start} ~ {end})",
        "en": "Fetching metrics: {env} ({start} ~ {end})",
    },
    "no_datapoints": {
        "ko": "리포트 기간에 데이터가 없습니다",
        "en": "No datapoints in the reporting period",
    },
    "summary": {
        "ko": "시계열 {series}개, 행 {rows}개",
        "en": "{series} series, {rows} rows",
    },
    "graph_directive": {
        "ko": "그래프 지시문",
        "en": "Graph directive",
    },
    "saved": {
        "ko": "저장됨: {path}",
        "en": "Saved: {path}",
    },
    "invalid_window": {
        "ko": "시작 시각이 종료 시각보다 늦습니다",
        "en": "Start time is after end time",
    },
    "invalid_datetime": {
        "ko": "날짜 형식이 잘못되었습니다: {value}",
        "en": "Invalid datetime: {value}",
    },
    "error_label": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    # =========================================================================
    # metrics / policies
    # =========================================================================
    "metrics_title": {
        "ko": "조회 가능한 메트릭",
        "en": "Available metrics",
    },
    "policies_title": {
        "ko": "번들 정책",
        "en": "Bundled policies",
    },
    "column_name": {
        "ko": "이름",
        "en": "Name",
    },
    "column_title": {
        "ko": "제목",
        "en": "Title",
    },
    "column_metrics": {
        "ko": "메트릭",
        "en": "Metrics",
    },
}
