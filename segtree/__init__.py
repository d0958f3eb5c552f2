"""
segtree is a static segment tree for answering point-containment and
range-overlap queries over a fixed set of half-open intervals.
"""

from .exceptions import SegmentTreeError, IntervalError
from .segment_tree import Interval, Node, SegmentTree
from .sinks import Sink, CountingSink, ListSink, UniqueSink
from .context import Context, get_context, set_context
