"""
core/config.py - 중앙 설정 관리

Acquia Cloud API 엔드포인트, 타임아웃, 날짜 형식 등 애플리케이션 전역 설정과
환경변수 헬퍼를 제공합니다.

Usage:
    from core.config import settings, get_credentials, get_timezone

    api_key, api_secret = get_credentials()
    tz_name = get_timezone()  # "UTC"

환경변수:
    ACQUIA_API_KEY      - Cloud API 키
    ACQUIA_API_SECRET   - Cloud API 시크릿
    ACQUIA_TIMEZONE     - 테이블 날짜 표시용 타임존 (기본: UTC)
    ACQUIA_API_TIMEOUT  - HTTP 요청 타임아웃 (초)
    LOG_LEVEL           - 로그 레벨 (기본: WARNING)
    LOG_FORMAT          - 로그 포맷
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "acquia-stack-metrics"

# =============================================================================
# 설정
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)"""

    # Acquia Cloud API
    API_BASE_URL: str = "https://cloud.acquia.com/api"
    TOKEN_URL: str = "https://accounts.acquia.com/api/auth/oauth/token"
    API_TIMEOUT: int = 30
    # 토큰 만료 직전 재발급 여유 시간 (초)
    TOKEN_EXPIRY_MARGIN_SECONDS: int = 60

    # 리포트
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    DEFAULT_TIMEZONE: str = "UTC"
    DEFAULT_REPORTING_DAYS: int = 1


settings = Settings()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_policies_path() -> Path:
    """번들 정책(YAML) 디렉토리 경로 반환"""
    return get_project_root() / "plugins" / "acquia" / "policies"


def get_version() -> str:
    """버전 문자열 반환

    설치된 배포판 메타데이터를 우선 사용하고, 소스 체크아웃에서는 version.txt를 읽습니다.

    Returns:
        버전 문자열 (둘 다 없으면 "0.0.0")
    """
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        version_file = get_project_root() / "version.txt"

    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    Args:
        name: 환경변수 이름
        default: 값이 없거나 해석할 수 없을 때 기본값

    Returns:
        변환된 bool 값
    """
    value = os.getenv(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int = 0) -> int:
    """환경변수를 int로 변환 (실패 시 기본값)"""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_api_timeout() -> int:
    """HTTP 요청 타임아웃 (ACQUIA_API_TIMEOUT 우선)"""
    return get_env_int("ACQUIA_API_TIMEOUT", default=settings.API_TIMEOUT)


def get_timezone() -> str:
    """테이블 날짜 표시용 타임존 이름"""
    return os.getenv("ACQUIA_TIMEZONE") or settings.DEFAULT_TIMEZONE


def get_credentials() -> tuple[str | None, str | None]:
    """Cloud API 자격 증명 (key, secret) 반환

    값 검증은 하지 않습니다. 누락 여부는 API 클라이언트가 인증 시점에 판단합니다.
    """
    return os.getenv("ACQUIA_API_KEY"), os.getenv("ACQUIA_API_SECRET")


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """환경변수(LOG_LEVEL, LOG_FORMAT)에서 로드"""
        default = cls()
        return cls(
            level=os.getenv("LOG_LEVEL", default.level).upper(),
            format=os.getenv("LOG_FORMAT", default.format),
        )
