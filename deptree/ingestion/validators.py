# deptree/ingestion/validators.py
from typing import List, Dict, Any, Iterable
import logging

from deptree.core.data_structures import Graph

logger = logging.getLogger(__name__)


class ValidationResult:
    """DTO для результатов валидации."""

    def __init__(self, is_valid: bool, errors: List[str]):
        self.is_valid = is_valid
        self.errors = errors


class GraphValidator:
    """
    Структурные проверки готового графа.
    Целостность ссылок уже гарантирует GraphBuilder, здесь проверяется дерево
    первичных вершин: число корней и отсутствие циклов.
    Циклы по вторичным/семантическим дугам допустимы и не проверяются.
    """

    @staticmethod
    def validate_graph(graph: Graph, strict: bool = True) -> ValidationResult:
        errors = []

        # 1. Корни (HEAD = 0)
        roots = len(graph.roots())
        if roots != 1:
            if strict:
                errors.append(f"ERROR: Found {roots} roots (expected 1)")
            else:
                # Частичная разметка (только теги, без HEAD) - не ошибка
                logger.debug(f"Graph has {roots} roots")

        # 2. Циклы по первичным дугам
        for node_id in GraphValidator._nodes_on_cycles(graph):
            errors.append(f"Node {node_id}: primary head chain forms a cycle")

        return ValidationResult(len(errors) == 0, errors)

    @staticmethod
    def _nodes_on_cycles(graph: Graph) -> List[int]:
        # Итеративный обход цепочек head, без рекурсии
        state: Dict[int, int] = {}  # 1 - в текущем пути, 2 - обработан
        on_cycle = set()

        for start in graph:
            path = []
            node = start
            while node is not None and node.id not in state:
                state[node.id] = 1
                path.append(node.id)
                node = graph.head_of(node.head)

            if node is not None and state[node.id] == 1:
                # Цикл: от node до конца пути
                on_cycle.update(path[path.index(node.id):])

            for node_id in path:
                state[node_id] = 2

        return [n.id for n in graph if n.id in on_cycle]

    @staticmethod
    def validate_batch(graphs: Iterable[Graph], strict: bool = True) -> Dict[str, Any]:
        """Агрегированная статистика валидации набора графов."""
        stats = {
            "total": 0,
            "valid": 0,
            "invalid": 0,
            "errors": []
        }

        seen_ids = set()

        for position, graph in enumerate(graphs, 1):
            stats["total"] += 1
            res = GraphValidator.validate_graph(graph, strict)

            sent_id = graph.metadata.get('sent_id')
            if sent_id and sent_id in seen_ids:
                res.is_valid = False
                res.errors.append(f"Duplicate sent_id: {sent_id}")
            if sent_id:
                seen_ids.add(sent_id)

            if res.is_valid:
                stats["valid"] += 1
            else:
                stats["invalid"] += 1
                stats["errors"].append({"id": sent_id or f"#{position}", "issues": res.errors})

        return stats
