# core/tools - 공통 도구 유틸리티
"""
공통 도구 유틸리티

- time: epoch/ISO-8601 변환, 리포트 기간 계산
"""
