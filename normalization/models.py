# normalization/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class NormalizationMetadata:
    total_records: int
    normalized_at: str
    column_mappings: Dict[str, str] = field(default_factory=dict)
    quality_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_records": self.total_records,
            "normalized_at": self.normalized_at,
            "column_mappings": dict(self.column_mappings),
            "quality_score": self.quality_score,
        }


@dataclass
class NormalizedData:
    schema_type: str
    original_columns: List[str]
    mapped_data: List[Dict[str, Any]]
    metadata: NormalizationMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_type": self.schema_type,
            "original_columns": list(self.original_columns),
            "mapped_data": self.mapped_data,
            "metadata": self.metadata.to_dict(),
        }
