"""
Result accumulation strategies for segment tree searches.

A sink is anything callable with one value. SegmentTree.search() and
SegmentTree.search_range() call it once per value per visited node, so
the same traversal can count, list or deduplicate. Plain functions and
bound methods (e.g. ``some_list.append``) work too; the classes here
just cover the common cases.
"""

from boltons.setutils import IndexedSet


class Sink(object):
    'interface base for sinks; subclasses implement __call__ and reset'

    def __call__(self, value):
        raise NotImplementedError()

    def reset(self):
        raise NotImplementedError()


class CountingSink(Sink):
    """Counts values without keeping them."""
    def __init__(self):
        self.count = 0

    def __call__(self, value):
        self.count += 1

    def reset(self):
        self.count = 0

    def __repr__(self):
        return '%s(count=%r)' % (self.__class__.__name__, self.count)


class ListSink(Sink):
    """Keeps every value in encounter order, duplicates included."""
    def __init__(self):
        self.results = []

    def __call__(self, value):
        self.results.append(value)

    def reset(self):
        self.results = []

    def __len__(self):
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.results)


class UniqueSink(Sink):
    """
    Keeps each distinct value once, in the order it was first seen.
    Values must be hashable.
    """
    def __init__(self):
        self.results = IndexedSet()

    def __call__(self, value):
        self.results.add(value)

    def reset(self):
        self.results = IndexedSet()

    def __len__(self):
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def __contains__(self, value):
        return value in self.results

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self.results))
