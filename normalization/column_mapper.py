# normalization/column_mapper.py

import logging
from collections import defaultdict
from typing import Callable, Dict, Optional, Sequence, Tuple

from config.domain_schema import ColumnSchema, DataSchema
from .keyword_matcher import calculate_similarity


logger = logging.getLogger(__name__)

# 최소 유사도. 이 값 이하는 매칭 없음으로 본다.
MIN_MATCH_SCORE = 0.3


class ColumnAutoMapper:
    """스키마 컬럼마다 가장 유사한 원본 컬럼을 찾는다."""

    def __init__(self, min_score: float = MIN_MATCH_SCORE):
        self.min_score = min_score

    def map(self, raw_columns: Sequence[str], schema: DataSchema) -> Dict[str, str]:
        mappings: Dict[str, str] = {}
        for schema_col in schema.columns:
            best_match, best_score = self._best_match(raw_columns, schema_col, self.composite_score)
            if best_match is None:
                # 합친 문장 기준으로 아무것도 못 찾았을 때만 검색어별 점수를 본다.
                best_match, best_score = self._best_match(raw_columns, schema_col, self.term_score)
            if best_match is not None:
                mappings[schema_col.name] = best_match
                logger.debug(
                    "Mapped %s <- %r (score=%.2f)", schema_col.name, best_match, best_score
                )

        self._log_shared_columns(mappings)
        return mappings

    def composite_score(self, raw_column, schema_col: ColumnSchema) -> float:
        """원본 컬럼명 vs 이름+설명+예시를 합친 문장의 유사도."""
        return calculate_similarity(raw_column, " ".join(schema_col.search_terms()))

    def term_score(self, raw_column, schema_col: ColumnSchema) -> float:
        """
        검색어(이름, 설명, 예시 각각)별 유사도의 최댓값.

        합친 문장은 키워드가 많아 한 단어짜리 컬럼명("수량")이 기준을 넘지 못한다.
        """
        return max(calculate_similarity(raw_column, term) for term in schema_col.search_terms())

    def _best_match(
        self,
        raw_columns: Sequence[str],
        schema_col: ColumnSchema,
        scorer: Callable[[str, ColumnSchema], float],
    ) -> Tuple[Optional[str], float]:
        best_match = None
        best_score = 0.0
        for raw_col in raw_columns:
            score = scorer(raw_col, schema_col)
            # 동점이면 먼저 나온 원본 컬럼 유지
            if score > best_score and score > self.min_score:
                best_score = score
                best_match = raw_col
        return best_match, best_score

    def _log_shared_columns(self, mappings: Dict[str, str]) -> None:
        # 하나의 원본 컬럼이 여러 스키마 컬럼에 매핑되는 것은 허용한다.
        targets = defaultdict(list)
        for schema_name, raw_name in mappings.items():
            targets[raw_name].append(schema_name)
        for raw_name, schema_names in targets.items():
            if len(schema_names) > 1:
                logger.debug("Raw column %r shared by %s", raw_name, schema_names)


def auto_map_columns(raw_columns: Sequence[str], schema: DataSchema) -> Dict[str, str]:
    return ColumnAutoMapper().map(raw_columns, schema)
