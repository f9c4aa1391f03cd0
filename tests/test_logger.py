import io
import json
import unittest
from contextlib import redirect_stderr

from optpy.logger import ConsoleLogger


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering(self):
        log = ConsoleLogger("t", level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.info("hidden")
            log.warn("shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("t WARN: shown", lines[0])

    def test_set_level(self):
        log = ConsoleLogger("t")
        log.set_level("debug")
        self.assertEqual(log.level_name, "DEBUG")
        log.set_level("bogus")
        self.assertEqual(log.level_name, "DEBUG")

    def test_bind_and_json(self):
        log = ConsoleLogger("t", json_output=True).bind(record="Rec")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.error("boom", path="$.a")
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["msg"], "boom")
        self.assertEqual(rec["fields"], {"record": "Rec", "path": "$.a"})

    def test_bind_does_not_mutate_parent(self):
        parent = ConsoleLogger("t", context={"a": 1})
        child = parent.bind(b=2)
        self.assertEqual(parent.context, {"a": 1})
        self.assertEqual(child.context, {"a": 1, "b": 2})
