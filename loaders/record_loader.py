import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd


CSV_SUFFIXES = {".csv", ".tsv", ".txt"}
EXCEL_SUFFIXES = {".xlsx", ".xls"}
JSON_SUFFIXES = {".json"}
JSON_WRAPPER_KEYS = ("data", "records", "rows")


def label_from_filename(path) -> str:
    """업로드 파일명(확장자 제외)을 데이터 라벨로 쓴다."""
    return Path(path).stem


class RecordLoader:
    """CSV / Excel / JSON 파일을 원본 record(dict) 리스트로 읽는다."""

    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def load(self, path, *, sep: Optional[str] = None) -> List[Dict[str, Any]]:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")

        suffix = file_path.suffix.lower()
        if suffix in CSV_SUFFIXES:
            return self.load_csv(file_path, sep=sep)
        if suffix in EXCEL_SUFFIXES:
            return self.load_excel(file_path)
        if suffix in JSON_SUFFIXES:
            return self.load_json(file_path)
        raise ValueError(f"Unsupported file type: {file_path.suffix} (CSV, XLSX, JSON)")

    def load_csv(self, path: Path, *, sep: Optional[str] = None) -> List[Dict[str, Any]]:
        delimiter = sep or self._detect_delimiter(path)
        # 셀 텍스트를 그대로 넘기고 타입 변환은 정규화 단계에 맡긴다.
        df = pd.read_csv(
            path,
            sep=delimiter,
            encoding=self.encoding,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
        df.columns = [str(c).strip() for c in df.columns]
        df = df.apply(lambda col: col.str.strip())
        return self._frame_to_records(df.mask(df == ""))

    def load_excel(self, path: Path) -> List[Dict[str, Any]]:
        df = pd.read_excel(path, sheet_name=0)
        df.columns = [str(c).strip() for c in df.columns]
        return self._frame_to_records(df)

    def load_json(self, path: Path) -> List[Dict[str, Any]]:
        with path.open("r", encoding=self.encoding) as f:
            payload = json.load(f)

        if isinstance(payload, dict):
            for key in JSON_WRAPPER_KEYS:
                if isinstance(payload.get(key), list):
                    return list(payload[key])
            return [payload]
        if isinstance(payload, list):
            return payload
        raise ValueError(f"JSON root must be an object or array: {path}")

    def _frame_to_records(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        frame = df.astype(object).where(df.notna(), None)
        return frame.to_dict(orient="records")

    def _detect_delimiter(self, path: Path) -> str:
        if path.suffix.lower() == ".tsv":
            return "\t"
        sample_size = 2048
        with path.open("r", encoding=self.encoding, errors="ignore") as f:
            sample = f.read(sample_size)
        if not sample:
            return ","
        try:
            dialect = csv.Sniffer().sniff(sample, delimiters=",;\t|")
            return dialect.delimiter
        except csv.Error:
            return "|" if "|" in sample else ","
