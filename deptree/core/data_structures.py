# deptree/core/data_structures.py
from typing import Optional, Dict, List, Iterator, Any

import networkx as nx
from pydantic import BaseModel, ConfigDict, Field

from .errors import DuplicateNodeId

# Виртуальный корень: HEAD = 0. Узла с таким ID в графе нет.
ROOT_ID = 0


class Arc(BaseModel):
    """
    Дуга к вершине (head). Хранит только ID вершины, разрешение
    в узел делает граф-владелец через таблицу ID -> индекс.
    """
    model_config = ConfigDict(frozen=True)

    head_id: int
    label: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.head_id == ROOT_ID


class DependencyArc(Arc):
    """Синтаксическая дуга (первичная или вторичная вершина)."""


class SemanticArc(Arc):
    """Семантическая дуга (SRL). Не смешивается с DependencyArc."""


class Node(BaseModel):
    """
    Токен предложения.
    head отсутствует, если HEAD = '_' или HEAD = 0 (корень);
    во втором случае is_root = True, а метка связи остается в deprel.
    """
    id: int  # 1-based, уникален внутри графа
    form: str
    lemma: Optional[str] = None
    pos: Optional[str] = None
    nament: Optional[str] = None
    feats: Dict[str, Optional[str]] = Field(default_factory=dict)

    head: Optional[DependencyArc] = None
    deprel: Optional[str] = None
    secondary_heads: List[DependencyArc] = Field(default_factory=list)
    semantic_heads: List[SemanticArc] = Field(default_factory=list)

    # HEAD = 0: первичной дуги нет, узел подчинен виртуальному корню
    is_root: bool = False
    # Номер строки во входном файле (для диагностики)
    line: Optional[int] = None


class Graph:
    """
    Граф одного предложения. Владеет узлами (в порядке строк)
    и таблицей ID -> позиция, построенной на первом проходе.
    """

    def __init__(self, metadata: Optional[Dict[str, Any]] = None):
        self._nodes: List[Node] = []
        self._index: Dict[int, int] = {}
        self.metadata: Dict[str, Any] = metadata or {}

    def add(self, node: Node) -> None:
        if node.id in self._index:
            raise DuplicateNodeId(f"Node ID {node.id} already exists", line=node.line)
        self._index[node.id] = len(self._nodes)
        self._nodes.append(node)

    def get(self, node_id: int) -> Optional[Node]:
        idx = self._index.get(node_id)
        return None if idx is None else self._nodes[idx]

    def head_of(self, arc: Optional[Arc]) -> Optional[Node]:
        """Узел-вершина дуги. None для корня и для отсутствующей дуги."""
        if arc is None:
            return None
        return self.get(arc.head_id)

    def index_of(self, node_id: int) -> Optional[int]:
        return self._index.get(node_id)

    @property
    def ids(self) -> List[int]:
        return [n.id for n in self._nodes]

    def roots(self) -> List[Node]:
        return [n for n in self._nodes if n.is_root]

    def dependents(self, node_id: int) -> List[Node]:
        """Прямые зависимые по первичным дугам, в порядке строк."""
        return [n for n in self._nodes if n.head is not None and n.head.head_id == node_id]

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Экспорт в networkx: ребра head -> dependent с атрибутами kind и label.
        kind: primary / secondary / semantic. Узел ROOT_ID добавляется,
        только если на него ссылается хотя бы одна дуга.
        """
        g = nx.MultiDiGraph()
        for n in self._nodes:
            g.add_node(n.id, form=n.form, pos=n.pos)

        for n in self._nodes:
            if n.head is not None:
                g.add_edge(n.head.head_id, n.id, kind="primary", label=n.head.label)
            elif n.is_root:
                g.add_edge(ROOT_ID, n.id, kind="primary", label=n.deprel)
            for arc in n.secondary_heads:
                g.add_edge(arc.head_id, n.id, kind="secondary", label=arc.label)
            for arc in n.semantic_heads:
                g.add_edge(arc.head_id, n.id, kind="semantic", label=arc.label)

        if ROOT_ID in g:
            g.nodes[ROOT_ID]["form"] = None
            g.nodes[ROOT_ID]["pos"] = None
        return g

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, position: int) -> Node:
        return self._nodes[position]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __repr__(self):
        return f"Graph({' '.join(n.form for n in self._nodes)!r})"
