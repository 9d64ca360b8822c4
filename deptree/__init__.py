from deptree.config import FormatOptions
from deptree.core.data_structures import Graph, Node, Arc, DependencyArc, SemanticArc, ROOT_ID
from deptree.core.errors import (
    DepTreeError, InvalidSchema, StreamReadError, BatchError, MissingRequiredField,
    DuplicateNodeId, UnresolvedHeadReference, MalformedArcToken, MalformedInteger
)
from deptree.core.interfaces import BaseAnalyzer
from deptree.core.schema import ColumnSchema, ABSENT
from deptree.ingestion.arcs import parse_arcs
from deptree.ingestion.builder import GraphBuilder
from deptree.ingestion.loader import DependencyReader, read_file
