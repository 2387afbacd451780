# Dispatch_test.py
import io
import unittest
from contextlib import redirect_stdout

from dispatcher import process
from registry import build_registry
from store import Store

class TestDispatch(unittest.TestCase):
    def setUp(self):
        self.reg = build_registry()
        self.store = Store()

    def run_lines(self, *lines):
        buf = io.StringIO()
        with redirect_stdout(buf):
            for line in lines:
                process(self.reg, self.store, line)
        return buf.getvalue().splitlines()

    def test_set_then_get(self):
        out = self.run_lines("set k=v", "get k")
        self.assertEqual(out, ["cmd set k=v", "cmd get k", "k = v"])

    def test_set_prints_only_echo(self):
        self.assertEqual(self.run_lines("set a=1"), ["cmd set a=1"])

    def test_get_unset(self):
        self.assertEqual(self.run_lines("get nope"), ["cmd get nope", "no value set for key nope"])

    def test_del_after_set(self):
        out = self.run_lines("set k=v", "del k", "get k")
        self.assertEqual(out[2:], ["removed k", "cmd get k", "no value set for key k"])

    def test_del_unset_does_not_alter_store(self):
        self.store.set("other", "1")
        out = self.run_lines("del k")
        self.assertEqual(out, ["cmd del k", "k was not set so not removed"])
        self.assertEqual(self.store.list(), [("other", "1")])

    def test_vars_empty(self):
        self.assertEqual(self.run_lines("vars"), ["cmd vars", "(none)"])

    def test_vars_sorted_regardless_of_insertion(self):
        out = self.run_lines("set b=2", "set a=1", "vars")
        self.assertEqual(out[-2:], ["a = 1", "b = 2"])

    def test_set_idempotent(self):
        self.run_lines("set k=v")
        once = self.store.list()
        self.run_lines("set k=v")
        self.assertEqual(self.store.list(), once)

    def test_malformed_is_unrecognized(self):
        self.assertEqual(self.run_lines("get "), ["cmd get ", "unrecognized command get "])
        self.assertEqual(self.run_lines("get ABC"), ["cmd get ABC", "unrecognized command get ABC"])

    def test_unknown_command(self):
        self.assertFalse(process(self.reg, self.store, ""))
        out = self.run_lines("hello")
        self.assertEqual(out, ["cmd hello", "unrecognized command hello"])

    def test_blank_lines_silent(self):
        self.assertEqual(self.run_lines("", "   ", "\t"), [])

    def test_returns_whether_handler_ran(self):
        with redirect_stdout(io.StringIO()):
            self.assertTrue(process(self.reg, self.store, "vars"))
            self.assertFalse(process(self.reg, self.store, "nope"))

    def test_end_to_end(self):
        out = self.run_lines("set x = 5", "get x", "del x", "get x", "vars")
        self.assertEqual(out, [
            "cmd set x = 5",
            "cmd get x", "x = 5",
            "cmd del x", "removed x",
            "cmd get x", "no value set for key x",
            "cmd vars", "(none)",
        ])

if __name__ == "__main__":
    unittest.main(verbosity=2)
