from typing import Dict

from .base_module import BaseDomainModule
from .sales_module import SalesDomainModule


DOMAIN_MODULES: Dict[str, BaseDomainModule] = {
    module.domain_name: module for module in [SalesDomainModule()]
}

_DEFAULT_MODULE = BaseDomainModule()


def get_domain_module(domain: str) -> BaseDomainModule:
    """파생 필드 규칙이 없는 도메인은 기본 모듈(변경 없음)을 돌려준다."""
    return DOMAIN_MODULES.get(domain, _DEFAULT_MODULE)
