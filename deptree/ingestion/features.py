# deptree/ingestion/features.py
from typing import Dict, Optional

from conllu.parser import parse_dict_value

from deptree.config import DEFAULT_BLANK_MARKER


def parse_features(raw: str, blank_marker: str = DEFAULT_BLANK_MARKER) -> Dict[str, Optional[str]]:
    """
    Строка признаков "Case=Nom|Number=Sing" -> dict.
    Содержимое не интерпретируется, разбор делает conllu.
    """
    if not raw or raw == blank_marker:
        return {}
    return dict(parse_dict_value(raw) or {})
