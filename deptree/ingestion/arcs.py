# deptree/ingestion/arcs.py
import re
from typing import List, Tuple

from deptree.config import DEFAULT_BLANK_MARKER, DEFAULT_ARC_DELIMITER, DEFAULT_HEAD_DELIMITER
from deptree.core.errors import MalformedArcToken

# ID пустого узла CoNLL-U: "8.1"
EMPTY_NODE_ID = re.compile(r"^\d+\.\d+$", re.ASCII)


def is_non_negative_int(value: str) -> bool:
    # str.isdigit() пропускает не-ASCII цифры ("٣"), поэтому isascii()
    return value.isascii() and value.isdigit()


def parse_arcs(raw_field: str,
               blank_marker: str = DEFAULT_BLANK_MARKER,
               arc_delimiter: str = DEFAULT_ARC_DELIMITER,
               head_delimiter: str = DEFAULT_HEAD_DELIMITER,
               skip_empty_nodes: bool = False) -> List[Tuple[int, str]]:
    """
    Разбирает список дуг вида "2:A1;5:AM-TMP" в [(2, "A1"), (5, "AM-TMP")].
    Порядок дуг сохраняется (он значим, например, для сочинения).
    Метка режется по первому разделителю, так что "3:nmod:poss" -> (3, "nmod:poss").
    skip_empty_nodes: дуги к пустым узлам ("2.1:nsubj") отбрасываются.

    Raises:
        MalformedArcToken: нет разделителя вершины или ID вершины не целое >= 0.
    """
    if raw_field == blank_marker:
        return []

    arcs = []
    for token in raw_field.split(arc_delimiter):
        head, sep, label = token.partition(head_delimiter)
        if not sep:
            raise MalformedArcToken(
                f"Arc token {token!r} has no head delimiter {head_delimiter!r}"
            )
        if skip_empty_nodes and EMPTY_NODE_ID.match(head):
            continue
        if not is_non_negative_int(head):
            raise MalformedArcToken(f"Arc token {token!r} has non-integer head ID {head!r}")
        arcs.append((int(head), label))

    return arcs
