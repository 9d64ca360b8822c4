import unittest
from deptree.core.errors import MalformedArcToken
from deptree.ingestion.arcs import parse_arcs
from deptree.ingestion.features import parse_features


class TestParseArcs(unittest.TestCase):

    def test_order_preserved(self):
        self.assertEqual(parse_arcs("2:A;5:B"), [(2, "A"), (5, "B")])
        self.assertEqual(parse_arcs("5:B;2:A"), [(5, "B"), (2, "A")])

    def test_blank_marker(self):
        self.assertEqual(parse_arcs("_"), [])
        self.assertEqual(parse_arcs("-", blank_marker="-"), [])

    def test_split_at_first_delimiter(self):
        # Метка может содержать разделитель (enhanced UD: nmod:poss)
        self.assertEqual(parse_arcs("3:nmod:poss"), [(3, "nmod:poss")])

    def test_empty_label_allowed(self):
        self.assertEqual(parse_arcs("4:"), [(4, "")])

    def test_custom_delimiters(self):
        self.assertEqual(
            parse_arcs("0:root|2:conj", arc_delimiter="|"),
            [(0, "root"), (2, "conj")]
        )
        self.assertEqual(
            parse_arcs("1=A0,2=A1", arc_delimiter=",", head_delimiter="="),
            [(1, "A0"), (2, "A1")]
        )

    def test_missing_delimiter(self):
        with self.assertRaises(MalformedArcToken):
            parse_arcs("2A")

    def test_bad_head_id(self):
        for raw in ("x:A", "-1:A", ":A", "1.5:A", "2:A;;3:B", "2:A;"):
            with self.subTest(raw=raw):
                with self.assertRaises(MalformedArcToken):
                    parse_arcs(raw)

    def test_empty_node_heads(self):
        # Пустые узлы CoNLL-U ("2.1") отбрасываются только по флагу
        self.assertEqual(
            parse_arcs("0:root|2.1:nsubj", arc_delimiter="|", skip_empty_nodes=True),
            [(0, "root")]
        )
        with self.assertRaises(MalformedArcToken):
            parse_arcs("0:root|2.1:nsubj", arc_delimiter="|")
        with self.assertRaises(MalformedArcToken):
            parse_arcs("2.:nsubj", arc_delimiter="|", skip_empty_nodes=True)


class TestParseFeatures(unittest.TestCase):

    def test_pairs(self):
        self.assertEqual(
            parse_features("Case=Nom|Number=Sing"),
            {"Case": "Nom", "Number": "Sing"}
        )

    def test_blank(self):
        self.assertEqual(parse_features("_"), {})
        self.assertEqual(parse_features(""), {})
        self.assertEqual(parse_features("-", blank_marker="-"), {})


if __name__ == '__main__':
    unittest.main()
