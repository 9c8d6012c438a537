"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.

예외 계층 구조:
    AuditError (베이스)
    ├── AuditValidationError (파라미터 검증)
    ├── ConfigError (설정/정책 파일)
    ├── CredentialError (API 자격 증명 누락)
    └── APICallError (Cloud API 호출 실패)

감사(audit) 코드는 협력 객체(API 클라이언트 등)의 예외를 잡거나 변환하지 않습니다.
예외를 사용자 메시지로 바꾸는 것은 CLI 계층의 몫입니다.

Usage:
    from core.exceptions import AuditValidationError

    if not isinstance(metrics, list):
        raise AuditValidationError("metrics", metrics, "list")
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class AuditError(Exception):
    """기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 검증
# =============================================================================


class AuditValidationError(AuditError):
    """감사 파라미터 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        message: Optional[str] = None,
    ):
        actual_type = type(value).__name__.capitalize()
        if message is None:
            message = f"{field.capitalize()} parameter must be a {expected}. {actual_type} given."
        super().__init__(message)
        self.field = field
        self.value = value
        self.expected = expected
        self.actual_type = actual_type
        self.details.update(
            {
                "field": field,
                "expected": expected,
                "actual_type": actual_type,
            }
        )


# =============================================================================
# 설정
# =============================================================================


class ConfigError(AuditError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class CredentialError(AuditError):
    """Cloud API 자격 증명 누락"""

    def __init__(self, missing: list):
        message = f"Cloud API 자격 증명이 없습니다: {', '.join(missing)}"
        super().__init__(message)
        self.missing = missing
        self.details["missing"] = missing


# =============================================================================
# API 호출
# =============================================================================


class APICallError(AuditError):
    """Cloud API 호출 실패

    2xx가 아닌 requests 응답의 상태 코드와 API 에러 메시지를 보존합니다.
    """

    def __init__(
        self,
        operation: str,
        status_code: Optional[int] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = operation
        if status_code:
            message = f"{message} 실패 (HTTP {status_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.operation = operation
        self.status_code = status_code
        self.error_message = error_message
        self.details.update(
            {
                "operation": operation,
                "status_code": status_code,
            }
        )

    @classmethod
    def from_response(cls, operation: str, response: Any, cause: Optional[Exception] = None) -> "APICallError":
        """requests.Response로부터 생성

        Cloud API 에러 본문은 {"error": "...", "message": "..."} 형식입니다.
        JSON이 아니면 본문 텍스트를 메시지로 사용합니다.
        """
        error_message = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            error_message = body.get("message") or body.get("error")
        elif response.text:
            error_message = response.text[:200]

        return cls(
            operation=operation,
            status_code=response.status_code,
            error_message=error_message,
            cause=cause,
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, APICallError):
        friendly_messages = {
            401: "인증에 실패했습니다. API 키와 시크릿을 확인하세요.",
            403: "권한이 없습니다. 해당 환경에 대한 접근 권한을 확인하세요.",
            404: "환경을 찾을 수 없습니다. 환경 ID를 확인하세요.",
        }
        return friendly_messages.get(error.status_code, str(error))

    return str(error)
