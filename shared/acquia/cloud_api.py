"""
shared/acquia/cloud_api.py - Acquia Cloud API v2 클라이언트

OAuth2 client credentials 인증, 토큰 캐싱, GET 요청을 담당합니다.
재시도는 하지 않습니다. 실패한 응답은 APICallError로 올라갑니다.

Usage:
    from shared.acquia.cloud_api import CloudApiClient

    client = CloudApiClient.from_env()
    env = client.get_environment("12-a47ac10b-58cc-4372-a567-0e02b2c3d470")
    data = client.get("environments/{id}/metrics/stackmetrics/data", params={...})
"""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from core.config import get_api_timeout, get_credentials, settings
from core.exceptions import APICallError, CredentialError

logger = logging.getLogger(__name__)


class CloudApiClient:
    """Acquia Cloud API v2 클라이언트

    Attributes:
        base_url: API 베이스 URL
        timeout: 요청 타임아웃 (초)
    """

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        base_url: str = settings.API_BASE_URL,
        token_url: str = settings.TOKEN_URL,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self._token_url = token_url
        self.timeout = timeout if timeout is not None else get_api_timeout()
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/hal+json, application/json"})
        self._token: str | None = None
        self._token_expires_at = 0.0

    @classmethod
    def from_env(cls, **kwargs: Any) -> CloudApiClient:
        """ACQUIA_API_KEY / ACQUIA_API_SECRET 환경변수로 생성"""
        api_key, api_secret = get_credentials()
        return cls(api_key, api_secret, **kwargs)

    # =========================================================================
    # 인증
    # =========================================================================

    def _authenticate(self) -> str:
        """액세스 토큰 발급 (만료 전까지 캐싱)"""
        if self._token and time.time() < self._token_expires_at:
            return self._token

        missing = [
            name
            for name, value in (("ACQUIA_API_KEY", self._api_key), ("ACQUIA_API_SECRET", self._api_secret))
            if not value
        ]
        if missing:
            raise CredentialError(missing)

        response = self._session.post(
            self._token_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self._api_key,
                "client_secret": self._api_secret,
            },
            timeout=self.timeout,
        )
        if not response.ok:
            raise APICallError.from_response("oauth.token", response)

        payload = response.json()
        self._token = payload["access_token"]
        expires_in = int(payload.get("expires_in", 300))
        self._token_expires_at = time.time() + max(expires_in - settings.TOKEN_EXPIRY_MARGIN_SECONDS, 0)
        logger.debug("Cloud API 토큰 발급 완료 (만료: %d초)", expires_in)
        return self._token

    def reset(self) -> None:
        """토큰 캐시 초기화 (테스트용)"""
        self._token = None
        self._token_expires_at = 0.0

    # =========================================================================
    # 요청
    # =========================================================================

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET 요청 후 JSON 본문 반환

        Args:
            path: 베이스 URL 기준 상대 경로 (예: "environments/{id}")
            params: 쿼리 파라미터

        Raises:
            CredentialError: 자격 증명 누락
            APICallError: 2xx가 아닌 응답
        """
        token = self._authenticate()
        url = f"{self.base_url}/{path.lstrip('/')}"

        logger.debug("GET %s params=%s", url, params)
        response = self._session.get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise APICallError.from_response(f"GET {path}", response)

        result: dict[str, Any] = response.json()
        return result

    def get_environment(self, environment_id: str) -> dict[str, Any]:
        """환경 정보 조회 (id, label, name, domains 등)"""
        return self.get(f"environments/{environment_id}")
