"""
A static segment tree over interval endpoints.

The tree is built once from a fixed collection of half-open intervals
``[start, end)``, each carrying a value, and answers two kinds of
questions: which values' intervals contain a point, and which overlap a
range. Nothing can be inserted or removed after construction.

Layout: the distinct endpoints are sorted and cut into elementary
leaves, which sit at the bottom of an implicit, 1-indexed binary tree
stored in a list (children of ``i`` are ``2i`` and ``2i + 1``). Each
interval is attached to the few nodes whose ranges exactly tile it.
"""

from collections import namedtuple
from itertools import groupby

from boltons.iterutils import pairwise

from .context import get_context, ZERO_WIDTH_MODES
from .exceptions import IntervalError
from .log import build_log
from .sinks import CountingSink, ListSink, UniqueSink


Interval = namedtuple('Interval', 'start end value')

TREE_ROOT = 1


class Node(object):
    __slots__ = ('start', 'end', 'values')

    def __init__(self, start, end):
        self.start = start
        self.end = end
        self.values = []

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%r, %r, values=%r)' % (cn, self.start, self.end, self.values)


def _to_interval(record, index):
    if isinstance(record, Interval):
        return record
    try:
        start, end, value = record
    except (TypeError, ValueError):
        raise IntervalError(record, index,
                            'expected a (start, end, value) record')
    return Interval(start, end, value)


class SegmentTree(object):
    """
    Static interval index. *intervals* is an iterable of
    ``(start, end, value)`` records (or :class:`Interval` instances)
    with ``start < end``; keys only need to be totally ordered.

    *zero_width* says what to do with ``start == end`` records:
    ``'raise'`` rejects the build with :class:`IntervalError`, ``'drop'``
    leaves them out. ``None`` takes the default from the current
    :class:`~segtree.context.Context`.
    """
    def __init__(self, intervals, zero_width=None):
        if zero_width is None:
            zero_width = get_context().zero_width
        elif zero_width not in ZERO_WIDTH_MODES:
            raise ValueError('expected zero_width to be one of %r, not %r'
                             % (ZERO_WIDTH_MODES, zero_width))
        self.zero_width = zero_width
        self.nodes = []
        self.dropped_count = 0

        with build_log.debug('build segment tree') as act:
            try:
                self.intervals = self._check_intervals(intervals)
            except IntervalError as ie:
                act.failure('rejected input: {error}', error=ie)
                raise
            leaf_count = self._build_tree()
            for interval in self.intervals:
                self._put_interval(interval.start, interval.end,
                                   interval.value, TREE_ROOT)
            act.success('indexed {interval_count} intervals in {node_count}'
                        ' nodes over {leaf_count} leaves, dropped'
                        ' {dropped_count} zero-width',
                        interval_count=len(self.intervals),
                        node_count=len(self.nodes),
                        leaf_count=leaf_count,
                        dropped_count=self.dropped_count)

    def _check_intervals(self, intervals):
        kept = []
        for index, record in enumerate(intervals):
            interval = _to_interval(record, index)
            if interval.start < interval.end:
                kept.append(interval)
            elif interval.start == interval.end:
                if self.zero_width == 'drop':
                    self.dropped_count += 1
                    continue
                raise IntervalError(interval, index,
                                    'zero-width interval, start equals end')
            else:
                raise IntervalError(interval, index)
        return tuple(kept)

    def _build_tree(self):
        borders = []
        for interval in self.intervals:
            borders.append(interval.start)
            borders.append(interval.end)
        if not borders:
            return 0
        # sorted, adjacent duplicates collapsed; keys need not be hashable
        borders = [b for b, _ in groupby(sorted(borders))]
        max_border = borders[-1]

        leaves = [Node(start, end) for start, end in pairwise(borders)]
        # closing boundary, never matched by a point
        leaves.append(Node(max_border, max_border))

        insert_before, layer_size = 1, 1
        while layer_size < len(leaves):
            insert_before += layer_size
            layer_size <<= 1
        # index 0 is padding so the root sits at TREE_ROOT
        nodes = [Node(max_border, max_border) for _ in range(insert_before)]
        nodes.extend(leaves)
        size = len(nodes)

        for position in range(size - len(leaves) - 1, TREE_ROOT - 1, -1):
            left_child = position << 1
            right_child = left_child + 1
            node = nodes[position]
            if left_child < size:
                node.start = nodes[left_child].start
                node.end = nodes[left_child].end
            if right_child < size:
                node.end = nodes[right_child].end

        self.nodes = nodes
        return len(leaves)

    def _put_interval(self, start, end, value, node_index):
        node = self.nodes[node_index]
        if node.start == start and node.end == end:
            node.values.append(value)
            return
        left_child = node_index << 1
        left_end = self.nodes[left_child].end
        if start < left_end:
            self._put_interval(start, min(left_end, end), value, left_child)
        if end > left_end:
            self._put_interval(max(start, left_end), end, value,
                               left_child + 1)

    @property
    def bounds(self):
        "``(min_endpoint, max_endpoint)``, or None for an empty tree."
        if not self.nodes:
            return None
        root = self.nodes[TREE_ROOT]
        return (root.start, root.end)

    def search(self, point, sink):
        """
        Call *sink* with the value of every interval containing *point*
        (``start <= point < end``). Each value comes up once per
        interval. Returns *sink*.
        """
        nodes = self.nodes
        if not nodes:
            return sink
        root = nodes[TREE_ROOT]
        if point < root.start or point >= root.end:
            return sink
        size = len(nodes)
        node_index = TREE_ROOT
        while node_index < size:
            for value in nodes[node_index].values:
                sink(value)
            left_child = node_index << 1
            right_child = left_child + 1
            if left_child < size and nodes[left_child].start <= point < nodes[left_child].end:
                node_index = left_child
            elif right_child < size and nodes[right_child].start <= point < nodes[right_child].end:
                node_index = right_child
            else:
                break
        return sink

    def search_range(self, start, end, sink):
        """
        Call *sink* with the value of every interval overlapping
        ``[start, end)``. An interval split across several nodes that
        all overlap the range comes up once per node. Returns *sink*.
        """
        nodes = self.nodes
        if not nodes or not start < end:
            return sink
        root = nodes[TREE_ROOT]
        if end <= root.start or start >= root.end:
            return sink
        self._find_overlapping(start, end, TREE_ROOT, sink)
        return sink

    def _find_overlapping(self, start, end, node_index, sink):
        nodes = self.nodes
        for value in nodes[node_index].values:
            sink(value)
        left_child = node_index << 1
        for child in (left_child, left_child + 1):
            if child < len(nodes) and nodes[child].start < end and nodes[child].end > start:
                self._find_overlapping(start, end, child, sink)

    def find_containing(self, point):
        "Values of intervals containing *point*, as a list."
        return self.search(point, ListSink()).results

    def count_containing(self, point):
        "Number of intervals containing *point*, without collecting them."
        return self.search(point, CountingSink()).count

    def find_overlapping(self, start, end, unique=True):
        """
        Values of intervals overlapping ``[start, end)``. With *unique*
        (the default) each distinct value appears once, in the order
        first found, and values must be hashable. Without it, a value
        is repeated for every tree node it was found on.
        """
        sink = UniqueSink() if unique else ListSink()
        return list(self.search_range(start, end, sink).results)

    def __contains__(self, point):
        return self.count_containing(point) > 0

    def __len__(self):
        return len(self.intervals)

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%r)' % (cn, list(self.intervals))
