# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 UI 컴포넌트들 (테이블 출력, 상태 메시지, 로깅 설정)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    get_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    setup_logging,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "console",
    "get_console",
    "print_error",
    "print_success",
    "print_table",
    "print_warning",
    "setup_logging",
]
