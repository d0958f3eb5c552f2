from lithoxyl import Logger, SensibleSink, SensibleFormatter, StreamEmitter


class SegTreeLogger(Logger):
    pass


build_log = SegTreeLogger('build')


stderr_fmt = SensibleFormatter(begin='',
                               end='{iso_end_local_notz} {module_path} - {end_message}')
stderr_emt = StreamEmitter('stderr')
stderr_sink = SensibleSink(formatter=stderr_fmt,
                           emitter=stderr_emt)


class LoggingContext(object):
    def __init__(self, enable_stderr=False):
        self.loggers = {'build': build_log}
        self.stderr_enabled = False
        if enable_stderr:
            self.enable_stderr()

    def get_logger(self, name):
        try:
            ret = self.loggers[name]
        except KeyError:
            ret = self.loggers[name] = SegTreeLogger(name)
            if self.stderr_enabled:
                ret.add_sink(stderr_sink)
        return ret

    def enable_stderr(self):
        if self.stderr_enabled:
            return
        for log in self.loggers.values():
            log.add_sink(stderr_sink)
        self.stderr_enabled = True

    def disable_stderr(self):
        if not self.stderr_enabled:
            return
        for log in self.loggers.values():
            log.set_sinks([s for s in log.sinks if s is not stderr_sink])
        self.stderr_enabled = False


logging_context = LoggingContext()


def enable_stderr():
    logging_context.enable_stderr()


def disable_stderr():
    logging_context.disable_stderr()
