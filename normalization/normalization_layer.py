# normalization/normalization_layer.py

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from config.domain_schema import DataSchema, get_schema
from domain.base_module import BaseDomainModule
from domain.registry import get_domain_module
from .array_merger import merge_array_columns
from .column_mapper import ColumnAutoMapper
from .models import NormalizationMetadata, NormalizedData
from .quality_scorer import EMPTY_QUALITY_SCORE, NEUTRAL_QUALITY_SCORE, calculate_quality_score
from .type_detector import detect_data_type
from .type_normalizer import TypeNormalizer


logger = logging.getLogger(__name__)

ORIGINAL_KEY = "_original"


class NormalizationLayer:
    """
    원본 record 묶음 + 자유 텍스트 라벨을 표준 스키마 record로 정규화한다.

    1) 배열 컬럼 병합  2) 도메인 판별  3) 컬럼 자동 매핑(첫 record 기준)
    4) 타입 변환 + 파생 필드  5) 품질 점수
    호출 간 상태를 갖지 않으며 입력 record는 변경하지 않는다.
    """

    def __init__(self):
        self.mapper = ColumnAutoMapper()
        self.converter = TypeNormalizer()

    def normalize(self, raw_records, data_type: str, *, now: Optional[datetime] = None) -> NormalizedData:
        now = _as_utc(now or datetime.now(timezone.utc))
        normalized_at = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        records = self._as_records(raw_records)
        if not records:
            return NormalizedData(
                schema_type=data_type,
                original_columns=[],
                mapped_data=[],
                metadata=NormalizationMetadata(
                    total_records=0,
                    normalized_at=normalized_at,
                    column_mappings={},
                    quality_score=EMPTY_QUALITY_SCORE,
                ),
            )
        self._validate(records)

        merged = merge_array_columns(records)
        domain = detect_data_type(data_type)
        schema = get_schema(domain)
        raw_columns = list(merged[0].keys())

        if schema is None:
            logger.debug("No schema for %r (domain=%s); passing records through", data_type, domain)
            return NormalizedData(
                schema_type=domain,
                original_columns=raw_columns,
                mapped_data=merged,
                metadata=NormalizationMetadata(
                    total_records=len(merged),
                    normalized_at=normalized_at,
                    column_mappings={},
                    quality_score=NEUTRAL_QUALITY_SCORE,
                ),
            )

        mappings = self.mapper.map(raw_columns, schema)
        module = get_domain_module(domain)
        epoch_millis = int(now.timestamp() * 1000)
        mapped_data = [
            self._normalize_record(row, index, schema, mappings, module, epoch_millis)
            for index, row in enumerate(merged)
        ]
        quality_score = calculate_quality_score(schema, mappings)
        logger.info(
            "Normalized %d records: label=%r domain=%s mapped=%d/%d quality=%.2f",
            len(mapped_data),
            data_type,
            domain,
            len(mappings),
            len(schema.columns),
            quality_score,
        )

        return NormalizedData(
            schema_type=domain,
            original_columns=raw_columns,
            mapped_data=mapped_data,
            metadata=NormalizationMetadata(
                total_records=len(mapped_data),
                normalized_at=normalized_at,
                column_mappings=mappings,
                quality_score=quality_score,
            ),
        )

    def _normalize_record(
        self,
        row: Dict[str, Any],
        index: int,
        schema: DataSchema,
        mappings: Dict[str, str],
        module: BaseDomainModule,
        epoch_millis: int,
    ) -> Dict[str, Any]:
        normalized: Dict[str, Any] = {}
        for schema_col in schema.columns:
            raw_name = mappings.get(schema_col.name)
            if raw_name is not None and raw_name in row:
                normalized[schema_col.name] = self.converter.convert(row[raw_name], schema_col.type)
            elif schema_col.required:
                normalized[schema_col.name] = None

        normalized = module.derive(normalized, index, epoch_millis)
        normalized[ORIGINAL_KEY] = row
        return normalized

    def _as_records(self, raw_records) -> List[Any]:
        if raw_records is None:
            return []
        if isinstance(raw_records, pd.DataFrame):
            frame = raw_records.astype(object).where(raw_records.notna(), None)
            return frame.to_dict(orient="records")
        return list(raw_records)

    def _validate(self, records: Sequence[Any]) -> None:
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise TypeError(
                    f"[Normalizer Contract Error] record #{index} is not a mapping: "
                    f"{type(record).__name__}"
                )


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


_default_layer = NormalizationLayer()


def normalize_data(raw_records, data_type: str, *, now: Optional[datetime] = None) -> NormalizedData:
    return _default_layer.normalize(raw_records, data_type, now=now)


def normalize_multiple_datasets(
    datasets: Sequence[Mapping[str, Any]], *, now: Optional[datetime] = None
) -> Dict[str, NormalizedData]:
    """데이터셋마다 normalize_data를 돌린다. 데이터셋 간 조인은 하지 않는다."""
    normalized: Dict[str, NormalizedData] = {}
    for index, dataset in enumerate(datasets):
        data_type = dataset["data_type"]
        key = f"dataset_{index}_{data_type}"
        normalized[key] = normalize_data(dataset.get("raw_data"), data_type, now=now)
    return normalized
