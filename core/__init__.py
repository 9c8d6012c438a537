# core/__init__.py
"""
core - Stack Metrics 감사 인프라

아키텍처:
    core/
    ├── tools/time/     # 날짜/시간 변환 (epoch 포맷, ISO-8601, 리포트 기간)
    ├── config.py       # 중앙 설정 관리
    ├── exceptions.py   # 통합 예외 계층
    └── policy.py       # YAML 감사 정책

Usage:
    from core.config import settings, get_credentials
    from core.exceptions import AuditValidationError
    from core.policy import load_policy

    policy = load_policy("http_status")
"""

from core import config, exceptions, policy

__all__: list[str] = [
    "config",
    "exceptions",
    "policy",
]
