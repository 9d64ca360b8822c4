import logging
import networkx as nx

from deptree.core.data_structures import Graph

logger = logging.getLogger(__name__)


class GraphProfiler:

    def profile_graph(self, graph: Graph) -> dict:
        """
        Вычисляет набор метрик для одного графа.
        """
        return {
            "id": graph.metadata.get("sent_id", "unknown"),
            "size": len(graph),
            "tree_depth": self._calculate_tree_depth(graph),
            "non_projectivity": self._is_non_projective(graph),
            "secondary_arcs": sum(len(n.secondary_heads) for n in graph),
            "semantic_arcs": sum(len(n.semantic_heads) for n in graph),
        }

    def _calculate_tree_depth(self, graph: Graph) -> int:
        """
        Максимальная глубина дерева по первичным дугам (в ребрах от корня).
        -1, если первичные дуги образуют цикл.
        """
        g = nx.DiGraph()
        roots = []

        for node in graph:
            g.add_node(node.id)
            if node.is_root:
                roots.append(node.id)
            elif node.head is not None:
                g.add_edge(node.head.head_id, node.id)

        if not nx.is_directed_acyclic_graph(g):
            return -1

        if not roots:
            return 0

        max_depth = 0
        for root in roots:
            # shortest_path в невзвешенном графе дает BFS уровни
            lengths = nx.shortest_path_length(g, source=root)
            max_depth = max(max_depth, max(lengths.values()))

        return max_depth

    def _is_non_projective(self, graph: Graph) -> bool:
        """
        Проверка на пересечение первичных дуг (start < end < start < end).
        Сравнение идет по позициям в предложении, а не по ID.
        """
        arcs = []
        for position, node in enumerate(graph):
            if node.head is None:
                continue
            head_position = graph.index_of(node.head.head_id)
            # Дуга всегда от min к max для проверки пересечений
            arcs.append(tuple(sorted((position, head_position))))

        for i in range(len(arcs)):
            for j in range(i + 1, len(arcs)):
                s1, e1 = arcs[i]
                s2, e2 = arcs[j]

                if s1 < s2 < e1 < e2:
                    return True
                if s2 < s1 < e2 < e1:
                    return True

        return False
