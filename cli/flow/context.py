"""
cli/flow/context.py - 실행 컨텍스트

감사 한 번의 실행에 필요한 상태(대상 환경, 리포트 기간, 옵션, 정책)와
감사가 되돌려 쓰는 결과를 담습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from core.policy import Policy


@dataclass
class ExecutionContext:
    """감사 실행 컨텍스트

    Attributes:
        environment: 대상 환경 (최소한 "id" 키를 가진 매핑)
        reporting_start: 리포트 기간 시작
        reporting_end: 리포트 기간 종료
        options: 실행 파라미터 (정책 기본값보다 우선)
        policy: 감사 정책 (제목, 기본 파라미터)
        results: 감사 결과 (result, env, table_headers, table_rows, graph)
    """

    environment: dict[str, Any]
    reporting_start: datetime
    reporting_end: datetime
    options: dict[str, Any] = field(default_factory=dict)
    policy: Policy | None = None
    results: dict[str, Any] = field(default_factory=dict)

    @property
    def environment_id(self) -> str:
        """대상 환경 ID"""
        return str(self.environment["id"])

    @property
    def title(self) -> str:
        """정책 제목 (정책이 없으면 빈 문자열)"""
        return self.policy.title if self.policy else ""

    def set_result(self, name: str, value: Any) -> None:
        self.results[name] = value
