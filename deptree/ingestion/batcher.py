# deptree/ingestion/batcher.py
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, TextIO

from conllu.parser import parse_comment_line

from deptree.config import FormatOptions
from deptree.core.errors import StreamReadError

logger = logging.getLogger(__name__)


@dataclass
class Batch:
    """Одно предложение: строки-токены, разбитые на колонки."""
    rows: List[List[str]]
    line_numbers: List[int]  # 1-based номер строки файла для каждой строки-токена
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def start_line(self) -> int:
        return self.line_numbers[0]

    def line_of(self, row_index: int) -> int:
        return self.line_numbers[row_index]

    def __len__(self):
        return len(self.rows)


class RecordBatcher:
    """
    Читает поток построчно и группирует непустые строки в батчи (предложения).
    Пустые и пробельные строки разделяют предложения.
    """

    def __init__(self, stream: TextIO, options: Optional[FormatOptions] = None):
        self.options = options or FormatOptions()
        self._stream = stream
        self._closed = False
        self.line_number = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._stream.close()

    def _readline(self) -> Optional[str]:
        """Следующая строка без перевода строки; None в конце потока."""
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            failed_at = self.line_number + 1
            logger.error(f"Read failure at line {failed_at}: {e}")
            try:
                self.close()
            except OSError as close_err:
                logger.error(f"Failed to close stream after read failure: {close_err}")
            raise StreamReadError(f"Failed to read input: {e}", line=failed_at) from e

        if line == "":
            return None
        self.line_number += 1
        return line.rstrip("\r\n")

    def _is_comment(self, line: str, rows: List[List[str]]) -> bool:
        # Комментарий: до первой строки-токена и без разделителя колонок;
        # "#\tSYM" или "#" внутри предложения остаются токенами
        prefix = self.options.comment_prefix
        if prefix is None or rows or not line.startswith(prefix):
            return False
        return self.options.column_delimiter not in line

    def _add_comment(self, metadata: Dict[str, Any], line: str):
        # "# sent_id = 42" -> {"sent_id": "42"}; префикс приводится к "#" для conllu
        text = line[len(self.options.comment_prefix):].strip()
        if not text:
            return
        if "=" in text:
            metadata.update(parse_comment_line(f"# {text}"))
        else:
            metadata[text] = None

    def next_batch(self) -> Optional[Batch]:
        """
        Следующий батч или None, если поток исчерпан (поток при этом закрывается).
        Строка-терминатор (пустая) поглощается.
        """
        if self._closed:
            return None

        rows: List[List[str]] = []
        metadata: Dict[str, Any] = {}
        line_numbers: List[int] = []

        while True:
            line = self._readline()
            if line is None:
                break

            if not line.strip():
                if rows:
                    break
                if metadata:
                    logger.debug(f"Dropping comment-only block before line {self.line_number}")
                    metadata = {}
                continue

            if self._is_comment(line, rows):
                self._add_comment(metadata, line)
                continue

            rows.append(line.split(self.options.column_delimiter))
            line_numbers.append(self.line_number)

        if not rows:
            self.close()
            return None

        widths = {len(r) for r in rows}
        if len(widths) > 1:
            logger.warning(
                f"Ragged rows in batch starting at line {line_numbers[0]}: "
                f"column counts {sorted(widths)}"
            )

        return Batch(rows=rows, line_numbers=line_numbers, metadata=metadata)
