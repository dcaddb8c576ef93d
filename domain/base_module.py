from __future__ import annotations

from typing import Any, Dict


class BaseDomainModule:
    """도메인별 파생 필드 계산의 공통 기반 클래스."""

    domain_name: str = "domain"

    def derive(self, record: Dict[str, Any], index: int, epoch_millis: int) -> Dict[str, Any]:
        """
        타입 변환이 끝난 record에 도메인 파생 필드를 채운다.

        index는 배치 안에서의 record 순번, epoch_millis는 정규화 호출 시각이다.
        기본 구현은 아무것도 하지 않는다.
        """
        return record
