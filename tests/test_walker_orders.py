"""Unit tests for the three walk orders of the synchronous Walker.

Covers the reference tree from the documentation, multiple roots,
pruning trackers and the None/empty leaf equivalence.
"""

import unittest
from itertools import islice
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkerlib.sync import Walker, TraversalStrategy


TREE = {
    'A': ['B', 'C'],
    'B': ['D'],
    'C': [],
    'D': [],
}


def tree_children(node):
    return TREE[node]


class TestReferenceTree(unittest.TestCase):
    """A -> [B, C], B -> [D]."""

    def setUp(self):
        self.walker = Walker.tree(tree_children)

    def test_pre_order(self):
        self.assertEqual(list(self.walker.pre_order('A')), ['A', 'B', 'D', 'C'])

    def test_post_order(self):
        self.assertEqual(list(self.walker.post_order('A')), ['D', 'B', 'C', 'A'])

    def test_breadth_first(self):
        self.assertEqual(list(self.walker.breadth_first('A')), ['A', 'B', 'C', 'D'])

    def test_traverse_by_name(self):
        self.assertEqual(list(self.walker.traverse('dfs_pre', 'A')), ['A', 'B', 'D', 'C'])
        self.assertEqual(list(self.walker.traverse('dfs_post', 'A')), ['D', 'B', 'C', 'A'])
        self.assertEqual(list(self.walker.traverse('bfs', 'A')), ['A', 'B', 'C', 'D'])

    def test_traverse_by_enum(self):
        nodes = self.walker.traverse(TraversalStrategy.DEPTH_FIRST_POST, 'A')
        self.assertEqual(list(nodes), ['D', 'B', 'C', 'A'])

    def test_from_collection_matches_variadic(self):
        self.assertEqual(list(self.walker.pre_order_from(['A'])), list(self.walker.pre_order('A')))
        self.assertEqual(list(self.walker.post_order_from(('A',))), list(self.walker.post_order('A')))
        self.assertEqual(list(self.walker.breadth_first_from(['A'])),
                         list(self.walker.breadth_first('A')))

    def test_walker_is_reusable(self):
        first = list(self.walker.pre_order('A'))
        second = list(self.walker.pre_order('A'))
        self.assertEqual(first, second)


class TestMultipleRoots(unittest.TestCase):
    """Walks that start from several nodes at once."""

    def setUp(self):
        self.walker = Walker.tree(tree_children)

    def test_pre_order_drains_first_root_before_second(self):
        self.assertEqual(list(self.walker.pre_order('B', 'C')), ['B', 'D', 'C'])

    def test_post_order_multiple_roots(self):
        self.assertEqual(list(self.walker.post_order('B', 'C')), ['D', 'B', 'C'])

    def test_breadth_first_visits_all_roots_first(self):
        self.assertEqual(list(self.walker.breadth_first('B', 'C', 'D')), ['B', 'C', 'D', 'D'])

    def test_no_roots(self):
        self.assertEqual(list(self.walker.pre_order()), [])
        self.assertEqual(list(self.walker.post_order()), [])
        self.assertEqual(list(self.walker.breadth_first_from([])), [])


class TestLeafEquivalence(unittest.TestCase):
    """None and an empty iterable both mean 'no successors'."""

    def _walker(self, leaf_value):
        children = {'A': ['B', 'C'], 'B': ['D']}
        return Walker.tree(lambda node: children.get(node, leaf_value))

    def test_same_results_for_none_and_empty(self):
        with_none = self._walker(None)
        with_empty = self._walker([])
        for order in ('pre_order', 'post_order', 'breadth_first'):
            with self.subTest(order=order):
                self.assertEqual(list(getattr(with_none, order)('A')),
                                 list(getattr(with_empty, order)('A')))

    def test_generator_successors(self):
        def children(node):
            if node < 3:
                yield node * 10 + 1
                yield node * 10 + 2
        walker = Walker.tree(lambda n: children(n) if n < 3 else None)
        self.assertEqual(list(walker.pre_order(1)), [1, 11, 12])
        self.assertEqual(list(walker.post_order(1)), [11, 12, 1])

    def test_none_inside_successors_is_skipped(self):
        children = {'A': [None, 'B', None], 'B': None}
        walker = Walker.tree(children.get)
        self.assertEqual(list(walker.pre_order('A')), ['A', 'B'])
        self.assertEqual(list(walker.post_order('A')), ['B', 'A'])
        self.assertEqual(list(walker.breadth_first('A')), ['A', 'B'])


class TestPruning(unittest.TestCase):
    """A tracker returning False hides a node and its whole subtree."""

    def setUp(self):
        self.requested = []

        def children(node):
            self.requested.append(node)
            return TREE[node]

        self.walker = Walker.custom(children, lambda node: node != 'B')

    def test_pre_order_prunes_subtree(self):
        self.assertEqual(list(self.walker.pre_order('A')), ['A', 'C'])
        self.assertNotIn('B', self.requested)
        self.assertNotIn('D', self.requested)

    def test_post_order_prunes_subtree(self):
        self.assertEqual(list(self.walker.post_order('A')), ['C', 'A'])
        self.assertNotIn('B', self.requested)

    def test_breadth_first_prunes_subtree(self):
        self.assertEqual(list(self.walker.breadth_first('A')), ['A', 'C'])
        self.assertNotIn('B', self.requested)

    def test_pruned_root(self):
        self.assertEqual(list(self.walker.pre_order('B', 'C')), ['C'])

    def test_post_order_parent_with_all_children_pruned(self):
        walker = Walker.custom(tree_children, lambda node: node in ('A', 'B'))
        self.assertEqual(list(walker.post_order('A')), ['B', 'A'])


class TestInfiniteStructures(unittest.TestCase):
    """Short-circuiting infinite walks."""

    def test_infinite_depth_pre_order(self):
        walker = Walker.tree(lambda n: [n + 1])
        self.assertEqual(list(islice(walker.pre_order(0), 5)), [0, 1, 2, 3, 4])

    def test_infinite_breadth_and_depth(self):
        # Binary heap numbering: children of n are 2n and 2n + 1
        walker = Walker.tree(lambda n: [2 * n, 2 * n + 1])
        self.assertEqual(list(islice(walker.breadth_first(1), 7)), [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(list(islice(walker.pre_order(1), 4)), [1, 2, 4, 8])

    def test_infinite_breadth_post_order(self):
        import itertools
        walker = Walker.tree(lambda n: itertools.count(n * 10 + 1) if n == 0 else None)
        self.assertEqual(list(islice(walker.post_order(0), 3)), [1, 2, 3])

    def test_deep_chain_does_not_recurse(self):
        depth = 50000
        walker = Walker.tree(lambda n: [n + 1] if n < depth else None)
        nodes = list(walker.post_order(0))
        self.assertEqual(len(nodes), depth + 1)
        self.assertEqual(nodes[0], depth)
        self.assertEqual(nodes[-1], 0)


if __name__ == '__main__':
    unittest.main()
