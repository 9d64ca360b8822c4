# deptree/ingestion/loader.py
import logging
from pathlib import Path
from typing import Optional, Union, TextIO, Generator

from deptree.config import FormatOptions
from deptree.core.data_structures import Graph
from deptree.core.schema import ColumnSchema
from deptree.ingestion.batcher import RecordBatcher
from deptree.ingestion.builder import GraphBuilder

logger = logging.getLogger(__name__)

Source = Union[str, Path, TextIO]


class DependencyReader:
    """
    Потоковый читатель графов: open() -> next() ... -> None.
    Поток закрывается сам в конце входа и при ошибке чтения.
    Ошибки данных (BatchError) поток не закрывают: следующий next()
    продолжит со следующего предложения.
    """

    def __init__(self, schema: ColumnSchema, options: Optional[FormatOptions] = None):
        self.schema = schema
        self.options = options or FormatOptions()
        self.builder = GraphBuilder(schema, self.options)
        self._batcher: Optional[RecordBatcher] = None
        self.source_name: Optional[str] = None

    def open(self, source: Source) -> "DependencyReader":
        self.close()
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(f"File not found: {path}")
            logger.info(f"Opening {path.name}")
            stream = open(path, "r", encoding=self.options.encoding)
            self.source_name = str(path)
        else:
            stream = source
            self.source_name = getattr(source, "name", "<stream>")
        self._batcher = RecordBatcher(stream, self.options)
        return self

    def next(self) -> Optional[Graph]:
        """Следующий граф или None в конце входа."""
        if self._batcher is None:
            return None

        batch = self._batcher.next_batch()
        if batch is None:
            logger.debug(f"End of input: {self.source_name}")
            self._batcher = None
            return None

        return self.builder.build(batch)

    def close(self):
        """Идемпотентно закрывает текущий источник."""
        if self._batcher is not None:
            batcher, self._batcher = self._batcher, None
            batcher.close()

    @property
    def line_number(self) -> int:
        return self._batcher.line_number if self._batcher is not None else 0

    def __iter__(self):
        return self

    def __next__(self) -> Graph:
        graph = self.next()
        if graph is None:
            raise StopIteration
        return graph

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def read_file(path: Union[str, Path], schema: ColumnSchema,
              options: Optional[FormatOptions] = None) -> Generator[Graph, None, None]:
    """Ленивый генератор графов из файла."""
    with DependencyReader(schema, options).open(path) as reader:
        yield from reader
