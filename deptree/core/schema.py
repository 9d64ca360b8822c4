# deptree/core/schema.py
from dataclasses import dataclass, fields
from typing import Dict, Any

from .errors import InvalidSchema

# Маркер отсутствующей колонки
ABSENT = -1


@dataclass(frozen=True)
class ColumnSchema:
    """
    Раскладка колонок табличного формата: имя поля -> индекс колонки.
    Отсутствующее поле помечается ABSENT (-1). FORM обязателен всегда.
    Проверяется сразу при создании, частично валидная схема невозможна.
    """
    form: int
    id: int = ABSENT
    lemma: int = ABSENT
    pos: int = ABSENT
    nament: int = ABSENT  # named entity tag
    feats: int = ABSENT
    head: int = ABSENT
    deprel: int = ABSENT
    xheads: int = ABSENT  # secondary heads
    sheads: int = ABSENT  # semantic heads

    def __post_init__(self):
        if self.form == ABSENT:
            raise InvalidSchema("FORM slot must be present")

        seen: Dict[int, str] = {}
        for f in fields(self):
            index = getattr(self, f.name)
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidSchema(f"Slot '{f.name}' must be an int, got {index!r}")
            if index == ABSENT:
                continue
            if index < 0:
                raise InvalidSchema(f"Slot '{f.name}' has negative column {index}")
            if index in seen:
                raise InvalidSchema(
                    f"Slots '{seen[index]}' and '{f.name}' share column {index}"
                )
            seen[index] = f.name

    def has(self, slot: str) -> bool:
        return getattr(self, slot) != ABSENT

    @property
    def max_column(self) -> int:
        return max(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    # --- Пресеты ---

    @classmethod
    def tagging(cls, form: int, pos: int) -> "ColumnSchema":
        """Только POS-теггинг."""
        return cls(form=form, pos=pos)

    @classmethod
    def dependency(cls, id: int, form: int, lemma: int, pos: int,
                   feats: int, head: int, deprel: int) -> "ColumnSchema":
        """Синтаксический парсинг."""
        return cls(id=id, form=form, lemma=lemma, pos=pos, feats=feats,
                   head=head, deprel=deprel)

    @classmethod
    def semantic_roles(cls, id: int, form: int, lemma: int, pos: int,
                       feats: int, head: int, deprel: int, sheads: int) -> "ColumnSchema":
        """Semantic role labeling."""
        return cls(id=id, form=form, lemma=lemma, pos=pos, feats=feats,
                   head=head, deprel=deprel, sheads=sheads)

    @classmethod
    def full_without_secondary(cls, id: int, form: int, lemma: int, pos: int, nament: int,
                               feats: int, head: int, deprel: int, sheads: int) -> "ColumnSchema":
        """Все поля, кроме вторичных зависимостей."""
        return cls(id=id, form=form, lemma=lemma, pos=pos, nament=nament,
                   feats=feats, head=head, deprel=deprel, sheads=sheads)

    @classmethod
    def full(cls, id: int, form: int, lemma: int, pos: int, nament: int, feats: int,
             head: int, deprel: int, xheads: int, sheads: int) -> "ColumnSchema":
        return cls(id=id, form=form, lemma=lemma, pos=pos, nament=nament, feats=feats,
                   head=head, deprel=deprel, xheads=xheads, sheads=sheads)

    @classmethod
    def conllu(cls) -> "ColumnSchema":
        """
        Стандартный CoNLL-U (10 колонок). XPOS и MISC не читаются,
        DEPS идет во вторичные вершины (разделитель дуг '|').
        """
        return cls(id=0, form=1, lemma=2, pos=3, feats=5, head=6, deprel=7, xheads=8)

    @classmethod
    def preset(cls, name: str, **slots: Any) -> "ColumnSchema":
        """Пресет по имени (для YAML-конфигов). Без пресета - общий конструктор."""
        factories = {
            "tagging": cls.tagging,
            "dependency": cls.dependency,
            "semantic_roles": cls.semantic_roles,
            "full_without_secondary": cls.full_without_secondary,
            "full": cls.full,
            "conllu": cls.conllu,
            "custom": cls,
        }
        if name not in factories:
            raise InvalidSchema(f"Unknown schema preset: {name}. Available: {', '.join(factories)}")
        try:
            return factories[name](**slots)
        except TypeError as e:
            raise InvalidSchema(f"Bad slots for preset '{name}': {e}") from e
