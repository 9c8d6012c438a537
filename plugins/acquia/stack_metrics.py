"""
plugins/acquia/stack_metrics.py - Stack Metrics 감사

Cloud API에서 환경의 인프라 메트릭 시계열(CPU, 메모리, HTTP 상태 코드 등)을 조회해
날짜 기준 테이블로 피벗하고, 리포트 템플릿이 그래프를 그릴 수 있는 지시문을 생성합니다.

처리 흐름:
    metrics 검증 → 조회 (1회) → 시계열 피벗 → 그래프 지시문 생성 → 결과 기록

결과 (ctx.results):
    result          - API 응답 원본
    env             - 대상 환경
    table_headers   - ["Date", <series>, ...]
    table_rows      - [[date, value|None, ...], ...] (시간 오름차순)
    graph           - [[[type="line" ... legend="bottom"]]]
    chart_type      - 해석된 chart-type 값 (그래프 type은 항상 line)

플러그인 규약:
    - run(ctx): 필수. 실행 함수.
    - collect_options(ctx): 선택. 추가 옵션 수집.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import questionary

from core.policy import Policy
from core.tools.time.utils import format_epoch
from shared.acquia import (
    STACK_METRICS,
    CloudApiClient,
    CloudApiMetricsFetcher,
    MetricsFetcher,
    extract_items,
    validate_metrics,
)

if TYPE_CHECKING:
    from cli.flow.context import ExecutionContext

logger = logging.getLogger(__name__)

DATE_HEADER = "Date"
CHART_TYPES = ("bar", "line")


# =============================================================================
# 파라미터
# =============================================================================


@dataclass(frozen=True)
class Parameter:
    """감사 파라미터 선언"""

    name: str
    description: str
    type: str
    default: Any


PARAMETERS: tuple[Parameter, ...] = (
    Parameter("metrics", "조회할 메트릭 목록 (STACK_METRICS 참고)", "array", ("web-cpu", "web-memory")),
    Parameter("chart-type", "그래프 종류 (bar 또는 line)", "string", "bar"),
    Parameter("chart-height", "그래프 높이 (px)", "integer", 250),
    Parameter("chart-width", "그래프 너비 (px)", "integer", 400),
    Parameter("y-axis-label", "Y축 라벨", "string", "Percentage"),
    Parameter("stacked", "데이터 누적 표시 여부", "boolean", False),
    Parameter("maintain-aspect-ratio", "리사이즈 시 원본 캔버스 비율(너비/높이) 유지 여부", "boolean", True),
)


def get_defaults() -> dict[str, Any]:
    """파라미터 기본값 (metrics는 매번 새 list)"""
    defaults = {p.name: p.default for p in PARAMETERS}
    defaults["metrics"] = list(defaults["metrics"])
    return defaults


def resolve_options(options: dict[str, Any], policy: Policy | None = None) -> dict[str, Any]:
    """기본값 < 정책 파라미터 < 실행 옵션 순으로 병합

    값이 None인 실행 옵션은 무시합니다. 정책 파라미터는 복사해서 병합하므로
    결과를 수정해도 캐시된 정책에는 영향이 없습니다.
    """
    resolved = get_defaults()
    if policy:
        resolved.update(copy.deepcopy(policy.parameters))
    resolved.update({k: v for k, v in options.items() if v is not None})

    if resolved["chart-type"] not in CHART_TYPES:
        logger.warning("지원하지 않는 chart-type: %s", resolved["chart-type"])

    return resolved


# =============================================================================
# 데이터 구조
# =============================================================================


def series_name(item: dict[str, Any], multiple_metrics: bool) -> str:
    """시계열 표시 이름 결정

    - host 메타데이터가 있으면 첫 번째 "." 앞부분 (web-1234.prod.acquia.com → web-1234)
    - 없으면 항목의 name (빈 문자열 포함), 그것도 없으면 metric 키
    - 메트릭을 여러 개 요청했고 metric 키로 대체된 이름이 아니면 ":metric"을 붙여 구분
    """
    metric = item["metric"]
    host = (item.get("metadata") or {}).get("host")

    if host:
        name = host.split(".", 1)[0]
    elif item.get("name") is not None:
        name = item["name"]
    else:
        return metric

    if multiple_metrics:
        name = f"{name}:{metric}"
    return name


@dataclass
class MetricSeries:
    """단일 메트릭 시계열"""

    name: str
    metric: str
    datapoints: list[tuple[int, Any]] = field(default_factory=list)  # (epoch, value)

    @classmethod
    def from_item(cls, item: dict[str, Any], multiple_metrics: bool) -> MetricSeries:
        """API 항목에서 생성 (datapoints는 [value, epoch] 쌍)"""
        return cls(
            name=series_name(item, multiple_metrics),
            metric=item["metric"],
            datapoints=[(int(float(epoch)), value) for value, epoch in item.get("datapoints") or []],
        )


class Table:
    """날짜 기준 테이블

    행은 epoch 키로 희소하게 누적되고, rows 조회 시 시간 오름차순으로 정렬됩니다.
    값이 없는 셀은 0이 아니라 None입니다.
    """

    def __init__(self, tz_name: str | None = None) -> None:
        self.headers: list[str] = [DATE_HEADER]
        self._tz_name = tz_name
        self._rows: dict[int, dict[int, Any]] = {}

    def column_index(self, name: str) -> int:
        """컬럼 인덱스 반환 (처음 보는 이름이면 끝에 추가)"""
        if name not in self.headers:
            self.headers.append(name)
        return self.headers.index(name)

    def add_series(self, series: MetricSeries) -> None:
        idx = self.column_index(series.name)
        for epoch, value in series.datapoints:
            if epoch not in self._rows:
                self._rows[epoch] = {0: format_epoch(epoch, self._tz_name)}
            self._rows[epoch][idx] = value

    @property
    def rows(self) -> list[list[Any]]:
        width = len(self.headers)
        return [
            [cells.get(i) for i in range(width)]
            for _, cells in sorted(self._rows.items())
        ]

    def __len__(self) -> int:
        return len(self._rows)


def pivot_series(
    items: list[dict[str, Any]],
    metric_count: int,
    tz_name: str | None = None,
) -> Table:
    """시계열 항목 목록을 날짜 기준 테이블로 피벗

    Args:
        items: API 응답의 시계열 항목
        metric_count: 요청한 메트릭 수 (2개 이상이면 이름에 metric 키를 붙임)
        tz_name: 날짜 표시 타임존

    Returns:
        Table
    """
    table = Table(tz_name)
    for item in items:
        table.add_series(MetricSeries.from_item(item, metric_count > 1))
    return table


# =============================================================================
# 그래프 지시문
# =============================================================================


def build_graph_spec(headers: list[str], options: dict[str, Any], title: str = "") -> dict[str, Any]:
    """그래프 설정 생성 (키 순서가 곧 출력 순서)

    Date를 제외한 각 컬럼 i에 대해 데이터 셀 "tr td:nth-child(i+1)"을 series로,
    헤더 셀 "tr th:nth-child(i+1)"을 series-labels로 사용합니다.
    """
    series = []
    series_labels = []
    for idx, name in enumerate(headers):
        if name == DATE_HEADER:
            continue
        nth = idx + 1
        series.append(f"tr td:nth-child({nth})")
        series_labels.append(f"tr th:nth-child({nth})")

    return {
        "type": "line",
        "labels": "tr td:first-child",
        "hide-table": True,
        "height": options.get("chart-height", 250),
        "width": options.get("chart-width", 400),
        "stacked": options.get("stacked", False),
        "y-axis": options.get("y-axis-label", "Percentage"),
        "maintain-aspect-ratio": options.get("maintain-aspect-ratio", True),
        "title": title,
        "series": ",".join(series),
        "series-labels": ",".join(series_labels),
        "legend": "bottom",
    }


def _format_value(value: Any) -> str:
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    return str(value)


def render_directive(spec: dict[str, Any]) -> str:
    """그래프 설정을 [[[key="value" ...]]] 지시문으로 직렬화

    값은 이스케이프하지 않습니다. 따옴표나 대괄호가 들어간 제목은 지시문을 깨뜨릴 수 있습니다.
    """
    attributes = " ".join(f'{key}="{_format_value(value)}"' for key, value in spec.items())
    return f"[[[{attributes}]]]"


# =============================================================================
# 실행
# =============================================================================


@dataclass
class StackMetricsResult:
    """감사 결과"""

    response: dict[str, Any]
    environment: dict[str, Any]
    table_headers: list[str]
    table_rows: list[list[Any]]
    graph: str
    chart_type: str = "bar"

    def to_dict(self) -> dict[str, Any]:
        return {
            "result": self.response,
            "env": self.environment,
            "table_headers": self.table_headers,
            "table_rows": self.table_rows,
            "graph": self.graph,
            "chart_type": self.chart_type,
        }


def gather(ctx: ExecutionContext, fetcher: MetricsFetcher, tz_name: str | None = None) -> StackMetricsResult:
    """메트릭 조회 → 피벗 → 그래프 지시문 생성 후 ctx.results에 기록

    Raises:
        AuditValidationError: metrics가 list가 아니거나 비어 있는 경우 (조회 전)
    """
    options = resolve_options(ctx.options, ctx.policy)
    metrics = validate_metrics(options["metrics"])

    response = fetcher.fetch(ctx.environment_id, metrics, ctx.reporting_start, ctx.reporting_end)
    table = pivot_series(extract_items(response), len(metrics), tz_name)

    graph = render_directive(build_graph_spec(table.headers, options, ctx.title))

    result = StackMetricsResult(
        response=response,
        environment=ctx.environment,
        table_headers=table.headers,
        table_rows=table.rows,
        graph=graph,
        chart_type=options["chart-type"],
    )
    for key, value in result.to_dict().items():
        ctx.set_result(key, value)

    logger.info("%s: 시계열 %d개, 행 %d개", ctx.environment_id, len(table.headers) - 1, len(table))
    return result


def collect_options(ctx: ExecutionContext) -> None:
    """조회할 메트릭과 누적 여부를 대화형으로 선택"""
    current = resolve_options(ctx.options, ctx.policy)

    selected = questionary.checkbox(
        "조회할 메트릭을 선택하세요",
        choices=[questionary.Choice(m, checked=m in current["metrics"]) for m in STACK_METRICS],
    ).ask()
    if selected:
        ctx.options["metrics"] = selected

    stacked = questionary.confirm("그래프를 누적(stacked)으로 표시할까요?", default=bool(current["stacked"])).ask()
    if stacked is not None:
        ctx.options["stacked"] = stacked


def run(ctx: ExecutionContext) -> StackMetricsResult:
    """Cloud API 자격 증명(환경변수)으로 감사 실행"""
    fetcher = CloudApiMetricsFetcher(CloudApiClient.from_env())
    return gather(ctx, fetcher)
