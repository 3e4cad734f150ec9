import unittest

from dualmap import tools


class PairTests(unittest.TestCase):

    def testIsPair(self):
        self.assertTrue(tools.is_pair(('a', 'b')))
        self.assertFalse(tools.is_pair(('a', 'b', 'c')))
        self.assertFalse(tools.is_pair(['a', 'b']))
        self.assertFalse(tools.is_pair('ab'))

    def testSinglePair(self):
        self.assertEqual(list(tools.iter_pairs(('a', 'b'))), [('a', 'b')])

    def testPairOfTuples(self):
        pair = ((1, 2), (3, 4))
        self.assertEqual(list(tools.iter_pairs(pair)), [pair])

    def testSequences(self):
        pairs = [('a', 'b'), ('c', 'd')]
        self.assertEqual(list(tools.iter_pairs(pairs)), pairs)
        self.assertEqual(list(tools.iter_pairs(iter(pairs))), pairs)
        self.assertEqual(sorted(tools.iter_pairs(set(pairs))), pairs)
        self.assertEqual(list(tools.iter_pairs(dict(pairs))), pairs)
        self.assertEqual(list(tools.iter_pairs(dict(pairs).items())), pairs)
        self.assertEqual(list(tools.iter_pairs([])), [])

    def testInvalidPairs(self):
        self.assertRaises(TypeError, list, tools.iter_pairs(('a',)))
        self.assertRaises(TypeError, list, tools.iter_pairs('ab'))
        self.assertRaises(TypeError, list, tools.iter_pairs(None))
        self.assertRaises(TypeError, list, tools.iter_pairs([['a', 'b']]))


class KeyTests(unittest.TestCase):

    def testSingleKeys(self):
        self.assertEqual(list(tools.iter_keys('abc')), ['abc'])
        self.assertEqual(list(tools.iter_keys((1, 2))), [(1, 2)])
        self.assertEqual(list(tools.iter_keys(None)), [None])

    def testKeySequences(self):
        self.assertEqual(list(tools.iter_keys(['a', 'b'])), ['a', 'b'])
        self.assertEqual(list(tools.iter_keys(iter(['a', 'b']))), ['a', 'b'])
        self.assertEqual(sorted(tools.iter_keys({'a', 'b'})), ['a', 'b'])
        self.assertEqual(list(tools.iter_keys(frozenset())), [])
