import io
import unittest
from deptree.core.schema import ColumnSchema
from deptree.ingestion.loader import DependencyReader
from deptree.profiler import GraphProfiler

SCHEMA = ColumnSchema.full(id=0, form=1, lemma=2, pos=3, nament=4, feats=5,
                           head=6, deprel=7, xheads=8, sheads=9)


def build(text):
    return DependencyReader(SCHEMA).open(io.StringIO(text.strip("\n") + "\n")).next()


class TestProfiler(unittest.TestCase):
    def setUp(self):
        self.profiler = GraphProfiler()

    def test_non_projectivity(self):
        # Синтетический пример пересечения дуг:
        # 1 -> 3, 2 -> 4. (1 < 2 < 3 < 4)
        graph = build("""
1	A	A	NOUN	_	_	3	obj	_	_
2	B	B	NOUN	_	_	4	obj	_	_
3	C	C	VERB	_	_	0	root	_	_
4	D	D	VERB	_	_	3	xcomp	_	_
""")
        self.assertTrue(self.profiler._is_non_projective(graph))

    def test_projective(self):
        graph = build("""
1	Мама	мама	NOUN	_	_	2	nsubj	_	_
2	мыла	мыть	VERB	_	_	0	root	_	_
3	раму	рама	NOUN	_	_	2	obj	_	_
""")
        self.assertFalse(self.profiler._is_non_projective(graph))

    def test_tree_depth(self):
        graph = build("""
1	Root	root	VERB	_	_	0	root	_	_
2	Child	child	NOUN	_	_	1	nsubj	_	_
3	Grandchild	grand	NOUN	_	_	2	nmod	_	_
""")
        # Root (1) -> Child (2) (dist=1) -> Grandchild (3) (dist=2)
        self.assertEqual(self.profiler._calculate_tree_depth(graph), 2)

    def test_tree_depth_cycle(self):
        graph = build("""
1	A	_	_	_	_	2	dep	_	_
2	B	_	_	_	_	1	dep	_	_
""")
        self.assertEqual(self.profiler._calculate_tree_depth(graph), -1)

    def test_profile_counts_arcs(self):
        graph = build("""
1	John	_	_	_	_	2	nsubj	3:nsubj	2:A0;3:A0
2	came	_	_	_	_	0	root	_	_
3	left	_	_	_	_	2	conj	_	_
""")
        profile = self.profiler.profile_graph(graph)

        self.assertEqual(profile["size"], 3)
        self.assertEqual(profile["secondary_arcs"], 1)
        self.assertEqual(profile["semantic_arcs"], 2)
        self.assertEqual(profile["id"], "unknown")
        self.assertEqual(profile["tree_depth"], 1)


class TestGraphExport(unittest.TestCase):

    def test_to_networkx(self):
        graph = build("""
1	John	_	_	_	_	2	nsubj	3:nsubj	2:A0
2	came	_	_	_	_	0	root	_	_
3	left	_	_	_	_	2	conj	_	_
""")
        g = graph.to_networkx()

        kinds = sorted((u, v, d["kind"]) for u, v, d in g.edges(data=True))
        self.assertEqual(kinds, [
            (0, 2, "primary"),
            (2, 1, "primary"),
            (2, 1, "semantic"),
            (2, 3, "primary"),
            (3, 1, "secondary"),
        ])
        self.assertEqual(g.nodes[1]["form"], "John")


if __name__ == '__main__':
    unittest.main()
