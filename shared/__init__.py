"""공유 유틸리티 - plugins와 cli에서 공통 사용.

- acquia: Acquia Cloud API 클라이언트와 메트릭 조회

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    plugins / cli
"""

from . import acquia

__all__ = ["acquia"]
