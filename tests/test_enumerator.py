# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for scan, iter_scan, iter_leaves and count_nodes."""

import pytest

from genro_treepath import (
    CyclicTreeError,
    TreePathError,
    count_nodes,
    get_path,
    iter_leaves,
    iter_scan,
    scan,
)


class TestScanOrder:
    """Tests for pre-order enumeration."""

    def test_scenario_order(self):
        """Test parent entries precede children, siblings keep order."""
        city = {'name': 'mashhad', 'code': '051'}
        r = {'name': 'mahdi', 'city': city}
        assert list(scan(r).items()) == [
            ('name', 'mahdi'),
            ('city', city),
            ('city.name', 'mashhad'),
            ('city.code', '051'),
        ]

    def test_sequences_by_index(self):
        """Test list elements are enumerated as decimal segments."""
        r = {'name': 'mahdi', 'age': 21, 'skills': ['js', 'ts']}
        assert list(scan(r)) == ['name', 'age', 'skills', 'skills.0', 'skills.1']

    def test_deep_nesting(self):
        """Test deeply nested chains."""
        r = {'a': {'b': {'c': {'d': 'x'}}}}
        assert list(scan(r)) == ['a', 'a.b', 'a.b.c', 'a.b.c.d']

    def test_mixed_nesting(self):
        """Test dicts inside lists inside dicts."""
        r = {'rows': [{'id': 1}, {'id': 2, 'tags': ['x']}]}
        assert list(scan(r)) == [
            'rows',
            'rows.0', 'rows.0.id',
            'rows.1', 'rows.1.id', 'rows.1.tags', 'rows.1.tags.0',
        ]

    def test_sequence_root(self):
        """Test a list root."""
        assert list(scan(['a', {'b': 1}])) == ['0', '1', '1.b']

    def test_empty_containers(self):
        """Test empty containers are entries without children."""
        assert scan({'a': {}, 'b': []}) == {'a': {}, 'b': []}

    def test_empty_and_leaf_roots(self):
        """Test empty and leaf roots yield nothing."""
        assert scan({}) == {}
        assert scan('text') == {}
        assert scan(42) == {}

    def test_strings_and_tuples_are_leaves(self):
        """Test str and tuple values are not descended into."""
        assert list(scan({'s': 'abc', 't': (1, 2)})) == ['s', 't']

    def test_non_string_keys_skipped(self):
        """Test non-str mapping keys and their subtrees are skipped."""
        r = {1: 'one', (2, 3): {'x': 1}, 'name': 'mahdi'}
        assert list(scan(r)) == ['name']

    def test_empty_key_skipped(self):
        """Test an empty-string key does not reuse its parent's path."""
        r = {'city': {'': 1, 'name': 'x'}}
        assert list(scan(r)) == ['city', 'city.name']
        assert len(scan(r)) == count_nodes(r)

    def test_dotted_key_skipped(self):
        """Test a key containing the separator is skipped."""
        r = {'a.b': {'c': 1}, 'd': 2}
        assert list(scan(r)) == ['d']

    def test_every_path_resolves(self):
        """Test each scanned path reads back the scanned value."""
        r = {'': 0, 1: 1, 'a': [{'b': None, 'c.d': 2}]}
        for path, value in scan(r).items():
            assert get_path(r, path) is value

    def test_deterministic(self):
        """Test repeated scans agree."""
        r = {'b': 1, 'a': {'y': 2, 'x': 3}}
        assert list(scan(r)) == list(scan(r))
        assert list(scan(r)) == ['b', 'a', 'a.y', 'a.x']


class TestScanCounts:
    """Tests for entry counts."""

    def test_count_every_node(self):
        """Test every key at every depth is counted once."""
        r = {'a': 1, 'b': {'c': 2, 'd': [3, 4]}}
        assert count_nodes(r) == 6
        assert len(scan(r)) == 6

    def test_iter_leaves(self):
        """Test iter_leaves skips container entries."""
        r = {'a': 1, 'b': {'c': 2, 'd': [3]}}
        assert list(iter_leaves(r)) == [('a', 1), ('b.c', 2), ('b.d.0', 3)]


class TestCycles:
    """Tests for the cycle guard."""

    def test_self_reference(self):
        """Test a dict containing itself raises."""
        r = {'a': 1}
        r['self'] = r
        with pytest.raises(CyclicTreeError) as exc_info:
            scan(r)
        assert exc_info.value.path == 'self'
        assert isinstance(exc_info.value, TreePathError)

    def test_indirect_cycle(self):
        """Test a cycle through a list raises at the closing path."""
        r = {'a': {'items': []}}
        r['a']['items'].append(r['a'])
        with pytest.raises(CyclicTreeError, match="a.items.0"):
            scan(r)

    def test_shared_subtree_is_not_a_cycle(self):
        """Test the same container under two paths is enumerated twice."""
        shared = {'x': 1}
        r = {'a': shared, 'b': shared}
        assert list(scan(r)) == ['a', 'a.x', 'b', 'b.x']

    def test_lazy_iteration_raises_on_reach(self):
        """Test iter_scan yields entries before the cycle is met."""
        r = {'first': 1}
        r['loop'] = r
        gen = iter_scan(r)
        assert next(gen) == ('first', 1)
        assert next(gen) == ('loop', r)
        with pytest.raises(CyclicTreeError):
            next(gen)


class TestDepth:
    """Tests for very deep trees."""

    def test_deeper_than_recursion_limit(self):
        """Test enumeration past the interpreter recursion limit."""
        depth = 5000
        r = {}
        node = r
        for _ in range(depth):
            child = {}
            node['n'] = child
            node = child
        node['leaf'] = 1
        assert count_nodes(r) == depth + 1
        last_path = '.'.join(['n'] * depth + ['leaf'])
        assert list(iter_leaves(r)) == [(last_path, 1)]
