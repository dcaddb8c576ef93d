# normalization/quality_scorer.py

from typing import Mapping, Tuple

from config.domain_keywords import IMPORTANT_OPTIONAL_FIELDS
from config.domain_schema import ColumnSchema, DataSchema

NEUTRAL_QUALITY_SCORE = 0.5
EMPTY_QUALITY_SCORE = 0.0


def important_fields(schema: DataSchema) -> Tuple[ColumnSchema, ...]:
    """필수 컬럼 + 스키마에 선언된 주요 선택 컬럼."""
    return tuple(
        col
        for col in schema.columns
        if col.required or col.name in IMPORTANT_OPTIONAL_FIELDS
    )


def calculate_quality_score(schema: DataSchema, column_mappings: Mapping[str, str]) -> float:
    fields = important_fields(schema)
    if not fields:
        return NEUTRAL_QUALITY_SCORE
    mapped = sum(1 for col in fields if column_mappings.get(col.name))
    return mapped / len(fields)
