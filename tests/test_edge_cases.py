"""Unit tests for edge cases in extraction.

Tests unusual shapes that real payloads produce: very deep nesting,
containers holding only files, empty containers, and concurrent use.
"""

import sys
import threading
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from extractfiles import FileSubstitute, TreeExtractor, extract_files, get_path


class TestDeepNesting(unittest.TestCase):
    """Nesting deeper than the interpreter's recursion limit."""

    def test_deep_list(self):
        depth = sys.getrecursionlimit() + 500
        file = FileSubstitute("deep")
        tree = [file]
        for _ in range(depth):
            tree = [tree]

        result = extract_files(tree)

        expected_path = ".".join(["0"] * (depth + 1))
        self.assertEqual(len(result.files), 1)
        self.assertEqual(result.files[file], [expected_path])

        node = result.clone
        for _ in range(depth):
            self.assertIsInstance(node, list)
            self.assertEqual(len(node), 1)
            node = node[0]
        self.assertEqual(node, [None])

    def test_deep_dict(self):
        depth = sys.getrecursionlimit() + 500
        file = FileSubstitute("deep")
        tree = {"f": file}
        for _ in range(depth):
            tree = {"n": tree}

        result = extract_files(tree)

        self.assertEqual(result.files[file], ["n." * depth + "f"])


class TestEmptyStructures(unittest.TestCase):
    """Empty containers are cloned, not passed through."""

    def test_empty_dict(self):
        tree = {}
        result = extract_files(tree)
        self.assertEqual(result.clone, {})
        self.assertIsNot(result.clone, tree)

    def test_empty_list(self):
        items = []
        result = extract_files(items)
        self.assertEqual(result.clone, [])
        self.assertIsNot(result.clone, items)

    def test_empty_tuple_becomes_list(self):
        self.assertEqual(extract_files(()).clone, [])


class TestPathEdgeCases(unittest.TestCase):
    """Path encoding for unusual keys."""

    def test_empty_string_key(self):
        file = FileSubstitute("")
        result = extract_files({"": file})
        self.assertEqual(result.files[file], [""])

    def test_numeric_string_key(self):
        file = FileSubstitute("")
        result = extract_files({"0": {"1": file}})
        self.assertEqual(result.files[file], ["0.1"])
        self.assertIsNone(get_path(result.clone, "0.1"))

    def test_large_index_has_no_leading_zeros(self):
        file = FileSubstitute("")
        items = [None] * 10 + [file]
        result = extract_files(items)
        self.assertEqual(result.files[file], ["10"])


class TestConcurrentUse(unittest.TestCase):
    """A shared extractor holds no per-call state."""

    def test_threads(self):
        extractor = TreeExtractor()
        results = {}

        def worker(index):
            file = FileSubstitute(str(index))
            tree = {"items": [{"file": file}] * 50}
            results[index] = (file, extractor.extract(tree, f"t{index}"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 8)
        for index, (file, result) in results.items():
            self.assertEqual(len(result.files), 1)
            paths = result.files[file]
            self.assertEqual(len(paths), 50)
            self.assertEqual(paths[0], f"t{index}.items.0.file")
            self.assertEqual(paths[-1], f"t{index}.items.49.file")
            first = result.clone["items"][0]
            self.assertTrue(all(item is first for item in result.clone["items"]))


if __name__ == "__main__":
    unittest.main()
