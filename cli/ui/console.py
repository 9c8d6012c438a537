"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력과 로깅 설정을 위한 함수들
"""

from __future__ import annotations

import logging
import platform
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.config import LogConfig

# urllib3 노이즈 로그 제한
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def setup_logging(config: LogConfig | None = None) -> None:
    """루트 로거에 Rich 핸들러 설정

    Args:
        config: 로깅 설정 (기본: LogConfig.from_env())
    """
    config = config or LogConfig.from_env()

    root = logging.getLogger()
    root.setLevel(config.level)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt=config.date_format))
    root.addHandler(handler)


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {message}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {message}[/yellow]")


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None) -> None:
    """헤더/행 목록을 Rich 테이블로 출력

    None 셀은 빈 칸으로 표시합니다.
    """
    table = Table(title=title, show_lines=False, header_style="bold cyan")
    for idx, header in enumerate(headers):
        table.add_column(header, justify="left" if idx == 0 else "right", no_wrap=idx == 0)

    for row in rows:
        table.add_row(*("" if cell is None else str(cell) for cell in row))

    console.print(table)
