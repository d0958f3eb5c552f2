'''
This module holds root exception types for the segment tree. They can be
used in try/except blocks by code building indexes from untrusted input.
'''


class SegmentTreeError(Exception):
    'root exception type, enables isinstance(exc, SegmentTreeError)'


class IntervalError(SegmentTreeError, ValueError):
    """
    Raised at construction time for a malformed interval record. Keeps
    the offending record and its position in the input, so the caller
    can point at the bad row without re-scanning.
    """
    def __init__(self, interval, index=None, reason=None):
        self.interval = interval
        self.index = index
        self.reason = reason or 'start must be less than end'
        msg = 'invalid interval %r' % (interval,)
        if index is not None:
            msg += ' at position %d' % index
        msg += ': %s' % self.reason
        super(IntervalError, self).__init__(msg)
