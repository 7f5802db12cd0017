"""Order and laziness properties checked over generated structures.

Random trees are built with a fixed seed so failures are reproducible.
"""

import random
from itertools import islice

import pytest

from walkerlib.sync import Walker


def random_tree(size, seed):
    """Random tree with nodes 0..size-1 rooted at 0, as a children dict."""
    rng = random.Random(seed)
    children = {node: [] for node in range(size)}
    for node in range(1, size):
        children[rng.randrange(node)].append(node)
    return children


def depths_of(children, root=0):
    depths = {root: 0}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in children[node]:
            depths[child] = depths[node] + 1
            stack.append(child)
    return depths


def descendants_of(children, node):
    found = set()
    stack = list(children[node])
    while stack:
        current = stack.pop()
        found.add(current)
        stack.extend(children[current])
    return found


class CountingSuccessors:
    """Successor function that records how often it is called."""

    def __init__(self, find):
        self.find = find
        self.calls = 0

    def __call__(self, node):
        self.calls += 1
        return self.find(node)


@pytest.fixture(params=[1, 7, 42])
def tree(request):
    return random_tree(200, request.param)


class TestOrderProperties:

    def test_pre_order_parent_before_descendants(self, tree):
        nodes = list(Walker.tree(tree.get).pre_order(0))
        position = {node: index for index, node in enumerate(nodes)}
        for node in tree:
            for descendant in descendants_of(tree, node):
                assert position[node] < position[descendant]

    def test_post_order_parent_after_descendants(self, tree):
        nodes = list(Walker.tree(tree.get).post_order(0))
        position = {node: index for index, node in enumerate(nodes)}
        for node in tree:
            for descendant in descendants_of(tree, node):
                assert position[node] > position[descendant]

    def test_breadth_first_by_depth(self, tree):
        depths = depths_of(tree)
        nodes = list(Walker.tree(tree.get).breadth_first(0))
        node_depths = [depths[node] for node in nodes]
        assert node_depths == sorted(node_depths)

    @pytest.mark.parametrize("order", ["pre_order", "post_order", "breadth_first"])
    def test_every_node_exactly_once(self, tree, order):
        nodes = list(getattr(Walker.tree(tree.get), order)(0))
        assert sorted(nodes) == sorted(tree)

    @pytest.mark.parametrize("order", ["pre_order", "post_order", "breadth_first"])
    def test_successors_called_once_per_node(self, tree, order):
        successors = CountingSuccessors(tree.get)
        list(getattr(Walker.tree(successors), order)(0))
        assert successors.calls == len(tree)


class TestLaziness:

    def test_nothing_runs_before_first_pull(self):
        successors = CountingSuccessors(lambda n: [n + 1])
        tracked = []
        walker = Walker.custom(successors, lambda n: tracked.append(n) is None)

        walker.pre_order(0)
        walker.post_order(0)
        walker.breadth_first(0)

        assert successors.calls == 0
        assert tracked == []

    @pytest.mark.parametrize("k", [1, 5, 50])
    def test_pre_order_calls_bounded_by_pulls(self, k):
        successors = CountingSuccessors(lambda n: [2 * n, 2 * n + 1])
        list(islice(Walker.tree(successors).pre_order(1), k))
        assert successors.calls == k

    @pytest.mark.parametrize("k", [1, 5, 50])
    def test_breadth_first_calls_bounded_by_pulls(self, k):
        successors = CountingSuccessors(lambda n: [2 * n, 2 * n + 1])
        list(islice(Walker.tree(successors).breadth_first(1), k))
        assert successors.calls == k

    def test_post_order_calls_bounded_by_pulls(self):
        # Each node has 3 leaf children and one child continuing the spine
        def find(node):
            kind, n = node
            if kind == 'leaf':
                return None
            if n >= 100:
                return None
            return [('leaf', n), ('leaf', n), ('leaf', n), ('spine', n + 1)]

        successors = CountingSuccessors(find)
        nodes = list(islice(Walker.tree(successors).post_order(('spine', 0)), 3))
        assert nodes == [('leaf', 0)] * 3
        assert successors.calls == 4

    @pytest.mark.slow
    def test_calls_independent_of_structure_size(self):
        for size in (1000, 100000):
            tree = random_tree(size, 3)
            successors = CountingSuccessors(tree.get)
            list(islice(Walker.tree(successors).pre_order(0), 10))
            assert successors.calls == 10
