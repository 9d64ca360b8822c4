# deptree/ingestion/builder.py
import logging
import re
from typing import List, Optional, Type

from deptree.config import FormatOptions
from deptree.core.data_structures import Graph, Node, Arc, DependencyArc, SemanticArc, ROOT_ID
from deptree.core.errors import (
    MissingRequiredField, UnresolvedHeadReference,
    MalformedArcToken, MalformedInteger
)
from deptree.core.schema import ColumnSchema
from deptree.ingestion.arcs import parse_arcs, is_non_negative_int
from deptree.ingestion.batcher import Batch
from deptree.ingestion.features import parse_features

logger = logging.getLogger(__name__)

# Multiword-токен "3-4" или пустой узел "5.1" (CoNLL-U)
RANGE_ID = re.compile(r"^(?:\d+-\d+|\d+\.\d+)$", re.ASCII)


class GraphBuilder:
    """
    Строит граф предложения из батча в два прохода:
      1. создание узлов и таблицы ID -> позиция;
      2. разрешение вершин (первичной, вторичных, семантических).
    Ко второму проходу все узлы уже существуют, поэтому ссылки вперед
    разрешаются так же, как ссылки назад.
    """

    def __init__(self, schema: ColumnSchema, options: Optional[FormatOptions] = None):
        self.schema = schema
        self.options = options or FormatOptions()

    def build(self, batch: Batch) -> Graph:
        graph = Graph(metadata=dict(batch.metadata))
        rows = []  # (row, line) строк, попавших в граф

        # 1. Узлы
        for i, row in enumerate(batch.rows):
            line = batch.line_of(i)
            if self.options.skip_ranges and self._is_range_row(row):
                logger.debug(f"Skipping range/empty node row at line {line}")
                continue

            node = self._make_node(row, position=len(rows) + 1, line=line)
            # DuplicateNodeId (с номером строки узла) бросает сам граф
            graph.add(node)
            rows.append((row, line))

        # 2. Вершины
        for node, (row, line) in zip(graph, rows):
            self._attach_heads(graph, node, row, line)

        logger.debug(f"Built graph with {len(graph)} nodes (line {batch.start_line})")
        return graph

    # --- Проход 1 ---

    def _field(self, row: List[str], slot: str, line: int) -> Optional[str]:
        """Значение колонки слота; None, если слот не задан в схеме."""
        index = getattr(self.schema, slot)
        if index < 0:
            return None
        if index >= len(row):
            raise MissingRequiredField(
                f"Row has {len(row)} columns, slot '{slot}' needs column {index}",
                line=line
            )
        return row[index]

    def _optional(self, row: List[str], slot: str, line: int) -> Optional[str]:
        value = self._field(row, slot, line)
        if value is None or value == self.options.blank_marker:
            return None
        return value

    def _is_range_row(self, row: List[str]) -> bool:
        if not self.schema.has("id") or self.schema.id >= len(row):
            return False
        return bool(RANGE_ID.match(row[self.schema.id]))

    def _make_node(self, row: List[str], position: int, line: int) -> Node:
        form = self._field(row, "form", line)

        raw_id = self._field(row, "id", line)
        if raw_id is None:
            node_id = position
        else:
            node_id = self._parse_int(raw_id, "id", line)
            if node_id == ROOT_ID:
                raise MalformedInteger(f"Node ID must be positive, got {raw_id!r}", line=line)

        feats_raw = self._field(row, "feats", line)
        feats = {} if feats_raw is None else parse_features(feats_raw, self.options.blank_marker)

        return Node(
            id=node_id,
            form=form,
            lemma=self._optional(row, "lemma", line),
            pos=self._optional(row, "pos", line),
            nament=self._optional(row, "nament", line),
            feats=feats,
            line=line,
        )

    # --- Проход 2 ---

    def _attach_heads(self, graph: Graph, node: Node, row: List[str], line: int):
        head_raw = self._field(row, "head", line)
        if head_raw is not None and head_raw != self.options.blank_marker:
            head_id = self._parse_int(head_raw, "head", line)
            label = self._field(row, "deprel", line)
            node.deprel = label
            if head_id == ROOT_ID:
                node.is_root = True
            else:
                node.head = self._resolve(graph, DependencyArc, head_id, label, line)

        xheads_raw = self._field(row, "xheads", line)
        if xheads_raw is not None:
            node.secondary_heads = self._arc_list(graph, DependencyArc, xheads_raw, line)

        sheads_raw = self._field(row, "sheads", line)
        if sheads_raw is not None:
            node.semantic_heads = self._arc_list(graph, SemanticArc, sheads_raw, line)

    def _arc_list(self, graph: Graph, arc_type: Type[Arc], raw: str, line: int) -> List[Arc]:
        try:
            pairs = parse_arcs(
                raw,
                blank_marker=self.options.blank_marker,
                arc_delimiter=self.options.arc_delimiter,
                head_delimiter=self.options.head_delimiter,
                skip_empty_nodes=self.options.skip_ranges,
            )
        except MalformedArcToken as e:
            raise MalformedArcToken(str(e), line=line) from e

        # В списках дуг 0 допустим: дуга к виртуальному корню (напр. "0:root" в DEPS)
        return [
            arc_type(head_id=head_id, label=label) if head_id == ROOT_ID
            else self._resolve(graph, arc_type, head_id, label, line)
            for head_id, label in pairs
        ]

    @staticmethod
    def _resolve(graph: Graph, arc_type: Type[Arc], head_id: int,
                 label: Optional[str], line: int) -> Arc:
        if head_id not in graph:
            raise UnresolvedHeadReference(f"Head ID {head_id} has no node in sentence", line=line)
        return arc_type(head_id=head_id, label=label)

    @staticmethod
    def _parse_int(value: str, slot: str, line: int) -> int:
        if not is_non_negative_int(value):
            raise MalformedInteger(f"Slot '{slot}' expects an integer, got {value!r}", line=line)
        return int(value)
