"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    stack-metrics --version
    stack-metrics run <ENV_ID> [옵션]     # 감사 실행
    stack-metrics metrics                 # 조회 가능한 메트릭 목록
    stack-metrics policies                # 번들 정책 목록

    예시:
    stack-metrics run 12-a47ac10b -m web-cpu -m web-memory --days 7
    stack-metrics run 12-a47ac10b --policy http_status -f json -o result.json

Usage:
    $ python -m cli.app run 12-a47ac10b
"""

from __future__ import annotations

import dataclasses
import json
import sys
from datetime import datetime
from pathlib import Path

import click
import requests
from click import Context

from cli.i18n import t
from core.config import LogConfig, get_version, settings

VERSION = get_version()


def _parse_datetime_option(value: str | None, tz_name: str | None) -> datetime | None:
    from core.tools.time.utils import parse_datetime

    if value is None:
        return None
    try:
        return parse_datetime(value, tz_name)
    except ValueError as e:
        raise click.BadParameter(t("cli.invalid_datetime", value=value)) from e


def _resolve_window(
    start: str | None, end: str | None, days: int, tz_name: str | None
) -> tuple[datetime, datetime]:
    """--from/--to/--days로 리포트 기간 결정"""
    from core.tools.time.utils import get_reporting_window

    end_dt = _parse_datetime_option(end, tz_name)
    start_dt = _parse_datetime_option(start, tz_name)

    default_start, end_dt = get_reporting_window(days, end_dt)
    start_dt = start_dt or default_start

    if start_dt > end_dt:
        raise click.BadParameter(t("cli.invalid_window"), param_hint="--from")
    return start_dt, end_dt


@click.group()
@click.version_option(VERSION, prog_name="stack-metrics")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력")
@click.pass_context
def cli(ctx: Context, lang: str, debug: bool) -> None:
    """Acquia Cloud Stack Metrics 감사 도구"""
    from cli.i18n import set_lang
    from cli.ui import setup_logging

    set_lang(lang)

    log_config = LogConfig.from_env()
    if debug:
        log_config = dataclasses.replace(log_config, level="DEBUG")
    setup_logging(log_config)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command("run")
@click.argument("environment_id")
@click.option("--policy", "policy_name", default="stack_metrics", show_default=True, help="정책 이름 또는 YAML 경로")
@click.option("-m", "--metric", "metrics", multiple=True, help="메트릭 (다중 가능, 정책 기본값 대체)")
@click.option("--from", "start", default=None, help="리포트 기간 시작 (ISO-8601)")
@click.option("--to", "end", default=None, help="리포트 기간 종료 (ISO-8601, 기본: 현재)")
@click.option("--days", default=settings.DEFAULT_REPORTING_DAYS, show_default=True, help="--from 미지정 시 기간 (일)")
@click.option("--chart-type", type=click.Choice(["bar", "line"]), default=None)
@click.option("--chart-height", type=int, default=None)
@click.option("--chart-width", type=int, default=None)
@click.option("--y-axis-label", default=None)
@click.option("--stacked/--no-stacked", default=None)
@click.option("--maintain-aspect-ratio/--no-maintain-aspect-ratio", default=None)
@click.option("--title", default=None, help="그래프 제목 (기본: 정책 제목)")
@click.option("--timezone", "tz_name", default=None, help="날짜 표시 타임존 (기본: ACQUIA_TIMEZONE 또는 UTC)")
@click.option("--no-resolve", is_flag=True, help="환경 정보 조회 생략")
@click.option("-f", "--format", "output_format", type=click.Choice(["console", "json"]), default="console")
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False), help="JSON 출력 파일 경로")
@click.option("-i", "--interactive", is_flag=True, help="메트릭 대화형 선택")
@click.pass_context
def run_cmd(
    ctx: Context,
    environment_id: str,
    policy_name: str,
    metrics: tuple[str, ...],
    start: str | None,
    end: str | None,
    days: int,
    chart_type: str | None,
    chart_height: int | None,
    chart_width: int | None,
    y_axis_label: str | None,
    stacked: bool | None,
    maintain_aspect_ratio: bool | None,
    title: str | None,
    tz_name: str | None,
    no_resolve: bool,
    output_format: str,
    output: str | None,
    interactive: bool,
) -> None:
    """Stack Metrics 감사 실행"""
    from cli.flow import ExecutionContext
    from cli.ui import console, print_error, print_success, print_table, print_warning
    from core.exceptions import AuditError, format_error_for_user
    from core.policy import load_policy
    from plugins.acquia import stack_metrics
    from shared.acquia import CloudApiClient, CloudApiMetricsFetcher

    start_dt, end_dt = _resolve_window(start, end, days, tz_name)

    options = {
        "metrics": list(metrics) or None,
        "chart-type": chart_type,
        "chart-height": chart_height,
        "chart-width": chart_width,
        "y-axis-label": y_axis_label,
        "stacked": stacked,
        "maintain-aspect-ratio": maintain_aspect_ratio,
    }

    try:
        policy = load_policy(policy_name)
        if title is not None:
            policy = dataclasses.replace(policy, title=title)

        client = CloudApiClient.from_env()
        environment = {"id": environment_id} if no_resolve else client.get_environment(environment_id)

        exec_ctx = ExecutionContext(
            environment=environment,
            reporting_start=start_dt,
            reporting_end=end_dt,
            options={k: v for k, v in options.items() if v is not None},
            policy=policy,
        )
        if interactive:
            stack_metrics.collect_options(exec_ctx)

        if output_format == "console":
            console.print(
                f"[dim]{t('cli.fetching', env=environment_id, start=start_dt.isoformat(), end=end_dt.isoformat())}[/dim]"
            )
        result = stack_metrics.gather(exec_ctx, CloudApiMetricsFetcher(client), tz_name=tz_name)

    except (AuditError, requests.RequestException) as e:
        print_error(t("cli.error_label", message=format_error_for_user(e)))
        if ctx.obj.get("debug"):
            console.print_exception()
        raise SystemExit(1) from e

    if output_format == "json":
        payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2, default=str)
        if output:
            Path(output).write_text(payload, encoding="utf-8")
            print_success(t("cli.saved", path=output))
        else:
            click.echo(payload)
        return

    if not result.table_rows:
        print_warning(t("cli.no_datapoints"))
    else:
        print_table(result.table_headers, result.table_rows, title=exec_ctx.title or None)
    console.print(t("cli.summary", series=len(result.table_headers) - 1, rows=len(result.table_rows)))
    console.print(f"\n[bold]{t('cli.graph_directive')}[/bold]")
    console.print(result.graph, markup=False, highlight=False)


@cli.command("metrics")
def metrics_cmd() -> None:
    """조회 가능한 메트릭 목록"""
    from cli.ui import print_table
    from shared.acquia import STACK_METRICS

    print_table([t("cli.column_name")], [[m] for m in STACK_METRICS], title=t("cli.metrics_title"))


@cli.command("policies")
def policies_cmd() -> None:
    """번들 정책 목록"""
    from cli.ui import print_table
    from core.policy import list_policies

    rows = [
        [p.name, p.title, ", ".join(p.parameters.get("metrics", []))]
        for p in list_policies()
    ]
    print_table(
        [t("cli.column_name"), t("cli.column_title"), t("cli.column_metrics")],
        rows,
        title=t("cli.policies_title"),
    )


def main() -> None:
    """console_script 진입점"""
    cli(obj={})


if __name__ == "__main__":
    sys.exit(main())
