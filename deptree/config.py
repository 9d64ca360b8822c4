# deptree/config.py
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from deptree.core.errors import InvalidSchema
from deptree.core.schema import ColumnSchema

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "reader.yaml"

# Разметка входного формата по умолчанию
DEFAULT_COLUMN_DELIMITER = "\t"
DEFAULT_BLANK_MARKER = "_"
DEFAULT_ARC_DELIMITER = ";"
DEFAULT_HEAD_DELIMITER = ":"
DEFAULT_ENCODING = "utf-8"

# Пресеты раскладок колонок. Слоты задаются как в ColumnSchema.preset(name, **slots)
SCHEMA_PRESETS = {
    "tagging": {"form": 0, "pos": 1},
    "dependency": {
        "id": 0, "form": 1, "lemma": 2, "pos": 3, "feats": 4, "head": 5, "deprel": 6
    },
    "semantic_roles": {
        "id": 0, "form": 1, "lemma": 2, "pos": 3, "feats": 4, "head": 5, "deprel": 6,
        "sheads": 7
    },
    "full_without_secondary": {
        "id": 0, "form": 1, "lemma": 2, "pos": 3, "nament": 4, "feats": 5, "head": 6,
        "deprel": 7, "sheads": 8
    },
    "full": {
        "id": 0, "form": 1, "lemma": 2, "pos": 3, "nament": 4, "feats": 5, "head": 6,
        "deprel": 7, "xheads": 8, "sheads": 9
    },
    "conllu": {},
}


@dataclass(frozen=True)
class FormatOptions:
    """Параметры текстового формата (разделители, blank-маркер, кодировка)."""
    column_delimiter: str = DEFAULT_COLUMN_DELIMITER
    blank_marker: str = DEFAULT_BLANK_MARKER
    arc_delimiter: str = DEFAULT_ARC_DELIMITER
    head_delimiter: str = DEFAULT_HEAD_DELIMITER
    encoding: str = DEFAULT_ENCODING
    comment_prefix: Optional[str] = None
    # Пропуск multiword-токенов (3-4) и пустых узлов (5.1) CoNLL-U
    skip_ranges: bool = False

    def __post_init__(self):
        if len(self.column_delimiter) != 1:
            raise InvalidSchema(
                f"Column delimiter must be a single character, got {self.column_delimiter!r}"
            )
        if not self.arc_delimiter or not self.head_delimiter:
            raise InvalidSchema("Arc and head delimiters must be non-empty")
        if self.arc_delimiter == self.head_delimiter:
            raise InvalidSchema(
                f"Arc and head delimiters must differ, both are {self.arc_delimiter!r}"
            )
        if not self.blank_marker:
            raise InvalidSchema("Blank marker must be non-empty")
        if self.comment_prefix == "":
            raise InvalidSchema("Comment prefix must be non-empty or None")

    @classmethod
    def conllu(cls) -> "FormatOptions":
        """Настройки под CoNLL-U: DEPS через '|', комментарии '#', MWT пропускаются."""
        return cls(arc_delimiter="|", comment_prefix="#", skip_ranges=True)


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def schema_from_config(cfg: Dict[str, Any]) -> ColumnSchema:
    """
    Секция 'schema' конфига:
        schema:
          preset: dependency   # имя из SCHEMA_PRESETS или custom
          columns: {...}       # переопределение индексов
    """
    section = cfg.get("schema", {}) or {}
    preset = section.get("preset", "dependency")
    slots = dict(SCHEMA_PRESETS.get(preset, {}))
    slots.update(section.get("columns", {}) or {})

    if preset == "conllu" and not slots:
        return ColumnSchema.conllu()
    if preset == "conllu":
        # Переопределение колонок conllu-пресета -> общий конструктор
        slots = {**ColumnSchema.conllu().as_dict(), **slots}
        preset = "custom"
    return ColumnSchema.preset(preset, **slots)


def options_from_config(cfg: Dict[str, Any]) -> FormatOptions:
    section = cfg.get("format", {}) or {}
    known = {f.name for f in fields(FormatOptions)}
    unknown = set(section) - known
    if unknown:
        raise InvalidSchema(f"Unknown format options: {', '.join(sorted(unknown))}")

    schema_section = cfg.get("schema", {}) or {}
    if schema_section.get("preset") == "conllu":
        base = FormatOptions.conllu()
        merged = {f.name: getattr(base, f.name) for f in fields(FormatOptions)}
        merged.update(section)
        return FormatOptions(**merged)
    return FormatOptions(**section)
