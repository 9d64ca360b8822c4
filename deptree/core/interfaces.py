# deptree/core/interfaces.py
from abc import ABC, abstractmethod
from .data_structures import Graph, Node


class BaseAnalyzer(ABC):
    """
    Следующий этап пайплайна после построения графа (например, морфоанализатор).
    Получает готовый граф и дополняет аннотации узлов.
    """

    def process(self, graph: Graph) -> Graph:
        for node in graph:
            self.analyze(node)
        return graph

    @abstractmethod
    def analyze(self, node: Node) -> None:
        """Обрабатывает один узел. Вершины и дуги трогать нельзя."""
        pass
