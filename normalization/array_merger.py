# normalization/array_merger.py

import re
from typing import Any, Dict, List, Mapping, Sequence

_ARRAY_KEY = re.compile(r"^([^\[\]]+)\[(\d+)\]$")


def merge_record_arrays(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    "zones[0]", "zones[1]" 형태의 컬럼을 zones 배열 하나로 합친다.

    인덱스 순서대로 배치하고 빠진 인덱스는 건너뛴다(None으로 채우지 않음).
    배열 패턴이 아닌 키와 중첩 인덱스 키("opts[0][0]")는 그대로 통과한다.
    """
    merged: Dict[str, Any] = {}
    array_fields: Dict[str, Dict[int, Any]] = {}

    for key, value in record.items():
        match = _ARRAY_KEY.match(key) if isinstance(key, str) else None
        if match:
            field_name, index = match.group(1), int(match.group(2))
            array_fields.setdefault(field_name, {})[index] = value
        else:
            merged[key] = value

    for field_name, slots in array_fields.items():
        merged[field_name] = [slots[i] for i in sorted(slots)]
    return merged


def merge_array_columns(records: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [merge_record_arrays(record) for record in records]
