import logging
from typing import List, Optional, Sequence, Literal, Generator, Union, TextIO
from pathlib import Path

from deptree.config import FormatOptions
from deptree.core.data_structures import Graph
from deptree.core.errors import BatchError
from deptree.core.interfaces import BaseAnalyzer
from deptree.core.schema import ColumnSchema
from deptree.ingestion.loader import DependencyReader

logger = logging.getLogger(__name__)


class GraphPipeline:
    """
    Главный класс-оркестратор.
    Читает графы (DependencyReader) и прогоняет их через анализаторы.
    on_error="skip": битые предложения логируются и пропускаются,
    on_error="raise": первая же ошибка данных прерывает чтение.
    Ошибки чтения потока (StreamReadError) пробрасываются всегда.
    """

    def __init__(self,
                 schema: ColumnSchema,
                 options: Optional[FormatOptions] = None,
                 analyzers: Sequence[BaseAnalyzer] = (),
                 on_error: Literal["raise", "skip"] = "raise"):
        if on_error not in ("raise", "skip"):
            raise ValueError(f"Unknown on_error policy: {on_error}")

        self.schema = schema
        self.options = options or FormatOptions()
        self.analyzers = list(analyzers)
        self.on_error = on_error
        self.errors: List[BatchError] = []

        logger.info(
            f"Initializing GraphPipeline with {len(self.analyzers)} analyzers, on_error='{on_error}'"
        )

    def process(self, source: Union[str, Path, TextIO]) -> Generator[Graph, None, None]:
        """Полный цикл: чтение -> построение графа -> анализаторы."""
        self.errors = []
        reader = DependencyReader(self.schema, self.options)

        with reader.open(source):
            while True:
                try:
                    graph = reader.next()
                except BatchError as e:
                    if self.on_error == "raise":
                        raise
                    logger.warning(f"Skipped malformed sentence in {reader.source_name}: {e}")
                    self.errors.append(e)
                    continue

                if graph is None:
                    break

                for analyzer in self.analyzers:
                    analyzer.process(graph)
                yield graph

        if self.errors:
            logger.info(f"{len(self.errors)} sentences skipped in {reader.source_name}")

    def process_file(self, path: Union[str, Path]) -> Generator[Graph, None, None]:
        return self.process(Path(path))
