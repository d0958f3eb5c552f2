'''
This module defines a context object which holds on to the package-wide
defaults used when building segment trees.
'''
from .log import logging_context


ZERO_WIDTH_MODES = ('raise', 'drop')


class Context(object):
    '''
    Context object is the clearing-house for package defaults. There is
    one Context at a time; access it with segtree.context.get_context()
    and replace it with segtree.context.set_context().

    ========================== ===================================== ==============================
    attribute                  description                           default
    ========================== ===================================== ==============================
    zero_width                 what SegmentTree does with intervals  'raise'
                               where start == end: 'raise' rejects
                               the whole build, 'drop' leaves them
                               out of the index and logs the count

    enable_stderr              attach the stderr sink to the         False
                               package loggers
    ========================== ===================================== ==============================
    '''
    def __init__(self, zero_width='raise', enable_stderr=False):
        if zero_width not in ZERO_WIDTH_MODES:
            raise ValueError('expected zero_width to be one of %r, not %r'
                             % (ZERO_WIDTH_MODES, zero_width))
        self.zero_width = zero_width
        self.enable_stderr = bool(enable_stderr)

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(zero_width=%r, enable_stderr=%r)' % (cn, self.zero_width,
                                                        self.enable_stderr)


_CONTEXT = None


def get_context():
    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = Context()
    return _CONTEXT


def set_context(context):
    global _CONTEXT
    if not isinstance(context, Context):
        raise TypeError('expected a Context, not %r' % type(context).__name__)
    _CONTEXT = context
    if context.enable_stderr:
        logging_context.enable_stderr()
    else:
        logging_context.disable_stderr()
    return context
