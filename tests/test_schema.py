import unittest
from deptree.core.schema import ColumnSchema, ABSENT
from deptree.core.errors import InvalidSchema


class TestColumnSchema(unittest.TestCase):

    def test_dependency_preset(self):
        schema = ColumnSchema.dependency(id=0, form=1, lemma=2, pos=3, feats=4, head=5, deprel=6)
        self.assertEqual(schema.head, 5)
        self.assertEqual(schema.xheads, ABSENT)
        self.assertFalse(schema.has("sheads"))
        self.assertEqual(schema.max_column, 6)

    def test_tagging_preset_leaves_other_slots_absent(self):
        schema = ColumnSchema.tagging(form=0, pos=1)
        self.assertFalse(schema.has("id"))
        self.assertFalse(schema.has("head"))
        self.assertTrue(schema.has("pos"))

    def test_full_and_conllu_presets(self):
        full = ColumnSchema.full(0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
        self.assertEqual(full.sheads, 9)
        self.assertEqual(full.nament, 4)

        conllu = ColumnSchema.conllu()
        self.assertEqual(conllu.head, 6)
        self.assertEqual(conllu.xheads, 8)

    def test_form_must_be_present(self):
        with self.assertRaises(InvalidSchema):
            ColumnSchema(form=ABSENT, pos=1)

    def test_duplicate_slot_rejected(self):
        # lemma и pos в одной колонке - ошибка конфигурации
        with self.assertRaises(InvalidSchema):
            ColumnSchema.dependency(id=0, form=1, lemma=2, pos=2, feats=4, head=5, deprel=6)

    def test_negative_slot_rejected(self):
        with self.assertRaises(InvalidSchema):
            ColumnSchema(form=0, lemma=-3)

    def test_schema_is_immutable(self):
        schema = ColumnSchema.tagging(form=0, pos=1)
        with self.assertRaises(Exception):
            schema.form = 5

    def test_preset_by_name(self):
        schema = ColumnSchema.preset("semantic_roles", id=0, form=1, lemma=2, pos=3,
                                     feats=4, head=5, deprel=6, sheads=7)
        self.assertEqual(schema.sheads, 7)

        with self.assertRaises(InvalidSchema):
            ColumnSchema.preset("nonexistent")
        with self.assertRaises(InvalidSchema):
            ColumnSchema.preset("tagging", form=0)  # нет pos


if __name__ == '__main__':
    unittest.main()
