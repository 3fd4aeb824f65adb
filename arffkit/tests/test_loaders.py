import gzip
import shutil
import tempfile
import unittest
import unittest.mock

from pathlib import Path

import requests

from arffkit.exceptions import UnsupportedDatatype, RowSchemaMismatch
from arffkit.context import ArffContext, NullLogger, BasicLogger
from arffkit.sinks import ListSink
from arffkit.loaders import load_arff, loads_arff

ArffContext.logger = NullLogger()

ARFF = """@relation weather
@attribute outlook {sunny, overcast, rainy}
@attribute 'play golf' {yes,no}
@data
sunny,no
overcast,yes % a comment
"""

class MockResponse:
    def __init__(self, lines):
        self.status_code = 200
        self.encoding    = "utf-8"
        self._lines      = lines

    def iter_lines(self, decode_unicode=False):
        return iter(self._lines)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass

class load_arff_Tests(unittest.TestCase):

    def setUp(self) -> None:
        self.directory = Path(tempfile.mkdtemp())

    def tearDown(self) -> None:
        shutil.rmtree(self.directory)

    def test_load_path(self):
        path = self.directory / "weather.arff"
        path.write_text(ARFF)

        document = load_arff(path)

        self.assertEqual(str(path), document.source)
        self.assertEqual("weather", document.relation)
        self.assertEqual(["outlook","play-golf"], document.names)
        self.assertEqual([["sunny","no"],["overcast","yes"]], document.rows)

    def test_load_gz(self):
        path = self.directory / "weather.arff.gz"
        with gzip.open(path, "wt") as f:
            f.write(ARFF)

        self.assertEqual(2, len(load_arff(str(path)).rows))

    def test_load_url(self):
        with unittest.mock.patch.object(requests, 'get', return_value=MockResponse(ARFF.splitlines())):
            document = load_arff("https://test.com/weather.arff")

        self.assertEqual("https://test.com/weather.arff", document.source)
        self.assertEqual(2, len(document.rows))

    def test_load_logs_time(self):
        path = self.directory / "weather.arff"
        path.write_text(ARFF)

        sink = ListSink()
        old_logger = ArffContext.logger
        try:
            ArffContext.logger = BasicLogger(sink)
            load_arff(path)
        finally:
            ArffContext.logger = old_logger

        self.assertEqual(f"Loading ARFF from {path}...", sink.items[0])
        self.assertTrue(sink.items[1].endswith("(completed)"))

    def test_load_failure_logged(self):
        path = self.directory / "bad.arff"
        path.write_text("@relation bad\n@attribute when date\n@data\n")

        sink = ListSink()
        old_logger = ArffContext.logger
        try:
            ArffContext.logger = BasicLogger(sink)
            with self.assertRaises(UnsupportedDatatype) as e:
                load_arff(path)
        finally:
            ArffContext.logger = old_logger

        self.assertEqual(2, e.exception.line_number)
        self.assertTrue(sink.items[1].endswith("(exception)"))

    def test_load_and_loads_agree(self):
        text = "@relation r\n@attribute a string\n@data\nfoo\u2028bar\nx\x0cy\r\nz\n"
        path = self.directory / "odd.arff"
        path.write_bytes(text.encode("utf-8"))

        from_disk   = load_arff(path, strict=True)
        from_memory = loads_arff(text, strict=True)

        self.assertEqual([["foo\u2028bar"],["x\x0cy"],["z"]], from_disk.rows)
        self.assertEqual(from_disk, from_memory)

    def test_load_loose(self):
        path = self.directory / "loose.arff"
        path.write_text("@attribute a real\n@data\n1,2\n")

        with self.assertRaises(RowSchemaMismatch):
            load_arff(path, strict=True)

        self.assertEqual([["1","2"]], load_arff(path, strict=False).rows)

class loads_arff_Tests(unittest.TestCase):

    def test_loads(self):
        document = loads_arff(ARFF, source="memory")

        self.assertEqual("memory", document.source)
        self.assertEqual(["sunny", "overcast", "rainy"], list(document.attributes[0].datatype.values))
        self.assertEqual(2, len(document.rows))

    def test_loads_marker(self):
        self.assertEqual([["a"]], loads_arff("@attribute x string\n@data\na # b", marker="#").rows)

if __name__ == '__main__':
    unittest.main()
