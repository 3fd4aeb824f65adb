import copy
import unittest

from arffkit.exceptions import AttributeNotFound, RowSchemaMismatch
from arffkit.context import ArffContext, NullLogger, BasicLogger
from arffkit.sinks import ListSink
from arffkit.datatypes import Numeric, Nominal
from arffkit.attributes import AttributeSpec
from arffkit.documents import ParsedDocument

ArffContext.logger = NullLogger()

def iris() -> ParsedDocument:
    attributes = [
        AttributeSpec("sepallength", Numeric()),
        AttributeSpec("sepalwidth" , Numeric()),
        AttributeSpec("petallength", Numeric()),
        AttributeSpec("petalwidth" , Numeric()),
        AttributeSpec("class"      , Nominal(["Iris-setosa","Iris-versicolor","Iris-virginica"]))
    ]
    rows = [
        ["5.1","3.5","1.4","0.2","Iris-setosa"],
        ["7.0","3.2","4.7","1.4","Iris-versicolor"],
        ["6.3","3.3","6.0","2.5","Iris-virginica"],
    ]
    return ParsedDocument("iris.arff", "iris", attributes, rows)

class ParsedDocument_Tests(unittest.TestCase):

    def test_init_copies(self):
        rows     = [["1"]]
        document = ParsedDocument(None, "r", [AttributeSpec("a", Numeric())], rows)
        rows[0].append("2")
        self.assertEqual([["1"]], document.rows)

    def test_defaults(self):
        document = ParsedDocument()
        self.assertIsNone(document.source)
        self.assertEqual("", document.relation)
        self.assertEqual([], document.attributes)
        self.assertEqual([], document.rows)
        self.assertEqual(0, len(document))

    def test_names(self):
        self.assertEqual(["sepallength","sepalwidth","petallength","petalwidth","class"], iris().names)

    def test_index(self):
        self.assertEqual(4, iris().index("class"))
        self.assertEqual(0, iris().index("SepalLength"))

    def test_index_missing(self):
        with self.assertRaises(AttributeNotFound):
            iris().index("missing")

    def test_index_first_duplicate(self):
        document = ParsedDocument(None, "r", [AttributeSpec("a", Numeric()), AttributeSpec("A", Numeric())])
        self.assertEqual(0, document.index("a"))

    def test_column(self):
        self.assertEqual(["Iris-setosa","Iris-versicolor","Iris-virginica"], iris().column("class"))

    def test_equality_ignores_source(self):
        other = iris()
        other.source = "elsewhere"
        self.assertEqual(iris(), other)
        self.assertNotEqual(iris(), iris().remove_attribute("class"))

    def test_repr(self):
        self.assertEqual("ParsedDocument(relation='iris', attributes=5, rows=3)", repr(iris()))

class remove_attribute_Tests(unittest.TestCase):

    def test_remove_last(self):
        document = iris()
        original = copy.deepcopy(document)

        returned = document.remove_attribute("class")

        self.assertIs(document, returned)
        self.assertEqual(4, len(document.attributes))
        self.assertNotIn("class", document.names)
        self.assertEqual([row[:-1] for row in original.rows], document.rows)

    def test_remove_middle(self):
        document = iris().remove_attribute("sepalwidth")

        self.assertEqual(["sepallength","petallength","petalwidth","class"], document.names)
        self.assertEqual(["5.1","1.4","0.2","Iris-setosa"], document.rows[0])
        self.assertEqual(["7.0","4.7","1.4","Iris-versicolor"], document.rows[1])
        self.assertTrue(all(len(row) == 4 for row in document.rows))

    def test_remove_ignores_case(self):
        self.assertEqual(4, len(iris().remove_attribute("CLASS").attributes))

    def test_remove_first_duplicate_only(self):
        document = ParsedDocument(None, "r", [AttributeSpec("a", Numeric()), AttributeSpec("a", Numeric())], [["1","2"]])
        document.remove_attribute("a")

        self.assertEqual(["a"], document.names)
        self.assertEqual([["2"]], document.rows)

    def test_remove_missing_is_noop(self):
        document = iris()
        document.remove_attribute("missing")
        self.assertEqual(iris(), document)
        self.assertEqual(iris().rows, document.rows)

    def test_remove_missing_is_logged(self):
        sink = ListSink()
        old_logger = ArffContext.logger
        try:
            ArffContext.logger = BasicLogger(sink)
            iris().remove_attribute("missing")
        finally:
            ArffContext.logger = old_logger

        self.assertEqual(1, len(sink.items))
        self.assertIn("missing", sink.items[0])

    def test_remove_str_converted_name(self):
        document = ParsedDocument(None, "r", [AttributeSpec("1", Numeric()), AttributeSpec("2", Numeric())], [["a","b"]])
        document.remove_attribute(str(2))
        self.assertEqual([["a"]], document.rows)

    def test_remove_short_row_fails_without_change(self):
        document = iris()
        document.rows[1] = ["7.0","3.2"]
        original = copy.deepcopy(document)

        with self.assertRaises(RowSchemaMismatch) as e:
            document.remove_attribute("class")

        self.assertIn("Row 2", str(e.exception))
        self.assertEqual(original, document)

    def test_remove_from_long_rows(self):
        document = iris()
        document.rows[0].append("extra")
        document.remove_attribute("sepallength")
        self.assertEqual(["3.5","1.4","0.2","Iris-setosa","extra"], document.rows[0])

    def test_remove_all(self):
        document = iris()
        for name in iris().names:
            document.remove_attribute(name)

        self.assertEqual([], document.attributes)
        self.assertEqual([[],[],[]], document.rows)

if __name__ == '__main__':
    unittest.main()
