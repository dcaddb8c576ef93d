# normalization/keyword_matcher.py

import re
from typing import List

_NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9가-힣]")


def extract_keywords(text) -> List[str]:
    """컬럼명/설명에서 의미 있는 키워드(2글자 이상)를 추출한다."""
    cleaned = _NON_KEYWORD_CHARS.sub(" ", str(text).lower())
    return [word for word in cleaned.split() if len(word) > 1]


def calculate_similarity(text_a, text_b) -> float:
    """
    두 문자열의 키워드 부분문자열 겹침 비율 (0~1).

    (k1, k2) 쌍 중 한쪽이 다른 쪽을 포함하면 1건으로 세고,
    두 키워드 집합 중 큰 쪽의 크기로 나눈다.
    """
    keywords_a = list(dict.fromkeys(extract_keywords(text_a)))
    keywords_b = list(dict.fromkeys(extract_keywords(text_b)))
    if not keywords_a or not keywords_b:
        return 0.0

    matches = 0
    for k1 in keywords_a:
        for k2 in keywords_b:
            if k2 in k1 or k1 in k2:
                matches += 1
    return min(1.0, matches / max(len(keywords_a), len(keywords_b)))
