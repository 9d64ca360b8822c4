import io
import unittest
import logging

from deptree.core.errors import UnresolvedHeadReference, StreamReadError
from deptree.core.interfaces import BaseAnalyzer
from deptree.core.schema import ColumnSchema
from deptree.pipeline import GraphPipeline

logging.basicConfig(level=logging.INFO)

SCHEMA = ColumnSchema.dependency(id=0, form=1, lemma=2, pos=3, feats=4, head=5, deprel=6)

TEXT = (
    "1\tCats\t_\tNNS\t_\t2\tnsubj\n"
    "2\tsleep\t_\tVBP\t_\t0\troot\n"
    "\n"
    "1\tbroken\t_\tJJ\t_\t7\tdep\n"
    "\n"
    "1\tDogs\t_\tNNS\t_\t2\tnsubj\n"
    "2\tbark\t_\tVBP\t_\t0\troot\n"
)


class LowercaseLemmatizer(BaseAnalyzer):
    """Игрушечный морфоанализатор: лемма = форма в нижнем регистре."""

    def analyze(self, node):
        node.lemma = node.form.lower()


class TestGraphPipeline(unittest.TestCase):

    def test_skip_policy(self):
        pipeline = GraphPipeline(SCHEMA, on_error="skip")
        graphs = list(pipeline.process(io.StringIO(TEXT)))

        self.assertEqual([g[0].form for g in graphs], ["Cats", "Dogs"])
        self.assertEqual(len(pipeline.errors), 1)
        self.assertIsInstance(pipeline.errors[0], UnresolvedHeadReference)
        self.assertEqual(pipeline.errors[0].line, 4)

    def test_raise_policy(self):
        pipeline = GraphPipeline(SCHEMA)
        graphs = pipeline.process(io.StringIO(TEXT))

        self.assertEqual(next(graphs)[0].form, "Cats")
        with self.assertRaises(UnresolvedHeadReference):
            next(graphs)

    def test_analyzers_applied(self):
        pipeline = GraphPipeline(SCHEMA, analyzers=[LowercaseLemmatizer()], on_error="skip")
        graphs = list(pipeline.process(io.StringIO(TEXT)))

        self.assertEqual([n.lemma for n in graphs[0]], ["cats", "sleep"])
        # Анализатор не трогает дуги
        self.assertEqual(graphs[0].get(1).head.head_id, 2)

    def test_stream_errors_not_skipped(self):
        class Broken(io.StringIO):
            def readline(self, *args):
                raise OSError("boom")

        pipeline = GraphPipeline(SCHEMA, on_error="skip")
        with self.assertRaises(StreamReadError):
            list(pipeline.process(Broken()))

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            GraphPipeline(SCHEMA, on_error="ignore")


if __name__ == '__main__':
    unittest.main()
