import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from loaders.record_loader import RecordLoader, label_from_filename
from normalization.models import NormalizedData
from normalization.normalization_layer import normalize_multiple_datasets


logger = logging.getLogger(__name__)


class ImportEngine:
    def __init__(self, loader: Optional[RecordLoader] = None):
        self.loader = loader or RecordLoader()

    def run(self, sources: Sequence[Tuple[Path, Optional[str]]]) -> Dict[str, Any]:
        """
        sources = [(파일 경로, 데이터 라벨 또는 None), ...]
        라벨이 없으면 파일명에서 가져온다.
        """

        # 1) 파일 -> 원본 record
        datasets = []
        for path, label in sources:
            records = self.loader.load(path)
            data_type = label or label_from_filename(path)
            logger.info("Loaded %s: %d records (label=%r)", path, len(records), data_type)
            datasets.append({"raw_data": records, "data_type": data_type})

        # 2) 데이터셋별 정규화
        generated_at = datetime.now(timezone.utc)
        normalized = normalize_multiple_datasets(datasets, now=generated_at)

        summary = summarize(normalized)
        for item in summary:
            logger.info(
                "%s -> %s: %d records, quality=%.2f",
                item["key"],
                item["schema_type"],
                item["total_records"],
                item["quality_score"],
            )

        return {
            "generated_at": generated_at.isoformat(),
            "datasets": {key: data.to_dict() for key, data in normalized.items()},
            "summary": summary,
        }


def summarize(normalized: Dict[str, NormalizedData]) -> List[Dict[str, Any]]:
    return [
        {
            "key": key,
            "schema_type": data.schema_type,
            "total_records": data.metadata.total_records,
            "quality_score": round(data.metadata.quality_score, 4),
            "mapped_columns": sorted(data.metadata.column_mappings),
        }
        for key, data in normalized.items()
    ]
