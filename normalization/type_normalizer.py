# normalization/type_normalizer.py

import json
import logging
import math
import numbers
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

import numpy as np
import pandas as pd


logger = logging.getLogger(__name__)

# 엑셀 시리얼 날짜 기준일. 1900년 윤년 버그까지 그대로 재현하기 위해 -2일 보정한다.
EXCEL_EPOCH = datetime(1900, 1, 1, tzinfo=timezone.utc)
EXCEL_SERIAL_MIN = 1000
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TRUTHY_STRINGS = frozenset({"true", "yes", "1", "y"})


class TypeNormalizer:
    """원본 값을 스키마 컬럼 타입으로 변환한다. 변환 실패는 None."""

    def convert(self, value: Any, target_type: str) -> Any:
        value = self._unwrap(value)
        if self.is_missing(value):
            return None
        try:
            if target_type == "string":
                return self._format_text(value)
            if target_type == "number":
                return self.to_number(value)
            if target_type == "date":
                return self.to_date(value)
            if target_type == "boolean":
                return self.to_boolean(value)
            if target_type == "array":
                return self.to_array(value)
            if target_type == "object":
                return self.to_object(value)
            return value
        except Exception as exc:  # 변환 실패는 배치를 중단하지 않는다
            logger.warning("Failed to convert %r to %s: %s", value, target_type, exc)
            return None

    def is_missing(self, value) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value == ""
        if pd.api.types.is_scalar(value):
            return bool(pd.isna(value))
        return False

    def to_number(self, value):
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, numbers.Real):
            number = value
        else:
            text = str(value).strip()
            if "_" in text:
                raise ValueError(f"invalid number literal: {text!r}")
            try:
                number = int(text)
            except ValueError:
                number = float(text)
        if isinstance(number, float) and not math.isfinite(number):
            return None
        return number

    def to_date(self, value) -> Optional[str]:
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            if value > EXCEL_SERIAL_MIN:
                return self._isoformat(EXCEL_EPOCH + timedelta(days=value - 2))
            return self._isoformat(UNIX_EPOCH + timedelta(milliseconds=value))

        if isinstance(value, (datetime, date)):
            parsed = pd.Timestamp(value)
        else:
            parsed = pd.to_datetime(str(value).strip())
        if pd.isna(parsed):
            return None
        return self._isoformat(parsed.to_pydatetime())

    def to_boolean(self, value) -> bool:
        if isinstance(value, bool):
            return value
        return self._format_text(value).lower() in TRUTHY_STRINGS

    def to_array(self, value) -> list:
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def to_object(self, value):
        if isinstance(value, dict):
            return value
        try:
            return json.loads(self._format_text(value))
        except (TypeError, ValueError):
            return {"raw": value}

    def _isoformat(self, dt: datetime) -> str:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def _format_text(self, value) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        # 2500.0 -> "2500"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def _unwrap(self, value):
        if isinstance(value, np.generic):
            return value.item()
        return value


_default_normalizer = TypeNormalizer()


def convert_value(value: Any, target_type: str) -> Any:
    return _default_normalizer.convert(value, target_type)
