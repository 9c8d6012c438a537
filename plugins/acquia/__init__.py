"""
plugins/acquia - Acquia Cloud Monitoring Tools

- stack_metrics: 인프라 메트릭 추이 테이블과 그래프 지시문
"""
