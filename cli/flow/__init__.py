# cli/flow/__init__.py
"""
CLI Flow Module

    context.py      - ExecutionContext, 감사 실행 상태 데이터 클래스
"""

from .context import ExecutionContext

__all__ = ["ExecutionContext"]
