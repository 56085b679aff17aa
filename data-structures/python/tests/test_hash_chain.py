import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from hash_chain import Chain


def _keys(chain):
    return [entry.key for entry in chain]


class TestChain(unittest.TestCase):
    def test_new_chain_is_empty(self):
        chain = Chain()
        self.assertEqual(chain.size(), 0)
        self.assertTrue(chain.is_empty())
        self.assertEqual(len(chain), 0)
        self.assertIsNone(chain._head)

    def test_append_single(self):
        chain = Chain()
        entry = chain.append("a", 1)
        self.assertEqual(chain.size(), 1)
        self.assertIs(chain._head, entry)
        self.assertEqual(entry.key, "a")
        self.assertEqual(entry.value, 1)
        self.assertIsNone(entry.next)

    def test_append_keeps_insertion_order(self):
        chain = Chain()
        chain.append("a", 1)
        chain.append("b", 2)
        chain.append("c", 3)
        self.assertEqual(_keys(chain), ["a", "b", "c"])
        self.assertEqual([entry.value for entry in chain], [1, 2, 3])

    def test_append_default_value_is_none(self):
        chain = Chain()
        entry = chain.append("a")
        self.assertIsNone(entry.value)

    def test_find_existing(self):
        chain = Chain()
        chain.append("a", 1)
        chain.append("b", 2)
        entry = chain.find("b")
        self.assertIsNotNone(entry)
        self.assertEqual(entry.value, 2)

    def test_find_missing(self):
        chain = Chain()
        chain.append("a", 1)
        self.assertIsNone(chain.find("z"))

    def test_find_on_empty(self):
        self.assertIsNone(Chain().find("a"))

    def test_find_returns_live_entry(self):
        chain = Chain()
        chain.append("a", 1)
        chain.find("a").value = 99
        self.assertEqual(chain._head.value, 99)


class TestChainRemove(unittest.TestCase):
    def setUp(self):
        self.chain = Chain()
        for key in ("a", "b", "c"):
            self.chain.append(key, key.upper())

    def test_remove_head(self):
        self.assertTrue(self.chain.remove("a"))
        self.assertEqual(_keys(self.chain), ["b", "c"])
        self.assertEqual(self.chain._head.key, "b")
        self.assertEqual(self.chain.size(), 2)

    def test_remove_middle(self):
        self.assertTrue(self.chain.remove("b"))
        self.assertEqual(_keys(self.chain), ["a", "c"])
        self.assertIs(self.chain._head.next, self.chain.find("c"))

    def test_remove_tail_then_append(self):
        self.assertTrue(self.chain.remove("c"))
        self.chain.append("d", "D")
        self.assertEqual(_keys(self.chain), ["a", "b", "d"])

    def test_remove_missing(self):
        self.assertFalse(self.chain.remove("z"))
        self.assertEqual(self.chain.size(), 3)

    def test_remove_all_then_append(self):
        for key in ("b", "a", "c"):
            self.assertTrue(self.chain.remove(key))
        self.assertTrue(self.chain.is_empty())
        self.assertIsNone(self.chain._head)
        self.chain.append("x", 1)
        self.assertEqual(_keys(self.chain), ["x"])

    def test_remove_twice(self):
        self.assertTrue(self.chain.remove("b"))
        self.assertFalse(self.chain.remove("b"))
        self.assertEqual(len(self.chain), 2)


if __name__ == "__main__":
    unittest.main()
