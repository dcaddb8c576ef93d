# config/settings.py

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    csv_encoding: str = "utf-8-sig"
    output_path: Optional[str] = None
    default_type: Optional[str] = None


def load_settings() -> Settings:
    """RETAIL_NORM_* 환경변수에서 배치 실행 설정을 읽는다."""
    return Settings(
        log_level=os.getenv("RETAIL_NORM_LOG_LEVEL", "INFO").upper(),
        csv_encoding=os.getenv("RETAIL_NORM_CSV_ENCODING", "utf-8-sig"),
        output_path=os.getenv("RETAIL_NORM_OUTPUT") or None,
        default_type=os.getenv("RETAIL_NORM_DEFAULT_TYPE") or None,
    )
