# normalization/type_detector.py

from config.domain_keywords import DOMAIN_TYPE_KEYWORDS, UNKNOWN_DOMAIN


def detect_data_type(label) -> str:
    """자유 텍스트 라벨을 sales/zone/traffic/product/customer/inventory/other 중 하나로 판별."""
    text = str(label or "").lower()
    for domain, keywords in DOMAIN_TYPE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return domain
    return UNKNOWN_DOMAIN
