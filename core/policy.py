"""
core/policy.py - 감사 정책 레지스트리

YAML 정책 파일 로드. 정책은 감사 실행의 제목(그래프 제목으로 사용)과
기본 파라미터를 정의합니다.

정책 파일 형식:
    name: stack_metrics
    title: "Web CPU & Memory"
    description: "..."
    parameters:
      metrics: [web-cpu, web-memory]
      y-axis-label: Percentage
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from core.config import get_policies_path
from core.exceptions import ConfigError

DEFAULT_POLICY = "stack_metrics"


@dataclass(frozen=True)
class Policy:
    """감사 정책"""

    name: str
    title: str
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """정책 속성 조회 (title, description 등)"""
        return getattr(self, key, default)


def _policy_from_dict(data: Any, source: str) -> Policy:
    if not isinstance(data, dict):
        raise ConfigError(source, "정책 파일은 매핑이어야 합니다")

    parameters = data.get("parameters") or {}
    if not isinstance(parameters, dict):
        raise ConfigError(source, "parameters는 매핑이어야 합니다")

    name = data.get("name") or Path(source).stem
    return Policy(
        name=name,
        title=str(data.get("title", name)),
        description=str(data.get("description", "")),
        parameters=parameters,
    )


def load_policy_file(path: str | Path) -> Policy:
    """경로로 정책 파일 로드

    Raises:
        ConfigError: 파일이 없거나 YAML이 잘못된 경우
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(str(path), "정책 파일이 없습니다")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(str(path), "YAML 파싱 실패", cause=e) from e

    return _policy_from_dict(data, str(path))


@lru_cache(maxsize=None)
def load_policy(name: str = DEFAULT_POLICY) -> Policy:
    """번들 정책 로드

    Args:
        name: 정책 이름 (plugins/acquia/policies/{name}.yaml) 또는 YAML 파일 경로

    Returns:
        Policy
    """
    if name.endswith((".yaml", ".yml")):
        return load_policy_file(name)
    return load_policy_file(get_policies_path() / f"{name}.yaml")


def list_policies() -> list[Policy]:
    """번들 정책 목록 (이름순)"""
    return [load_policy(p.stem) for p in sorted(get_policies_path().glob("*.yaml"))]
