"""
reporting.py
--------------

Side channel for diagnostics emitted while resolving datums.

Resolvers never raise for missing datums: they report through
a `Reporter` and return a failure flag. A reporter can be passed
to every resolver call; when it is omitted the process-wide
default set with `set_reporter` is used.
"""
import abc
import logging

from .transforms import format_transform

log = logging.getLogger('cadkinematic')


class Reporter(abc.ABC):
    """
    Fire-and-forget sink for warnings and information.
    """
    @abc.abstractmethod
    def warn(self, message):
        raise NotImplementedError('call a subclass!')

    @abc.abstractmethod
    def info(self, message):
        raise NotImplementedError('call a subclass!')

    def transform(self, label, transform):
        """
        Report a transform as an information message.

        Parameters
        ------------
        label : str
          What the transform describes
        transform : Transform
          Transform to print
        """
        self.info(f'{label}\n{format_transform(transform)}')


class LogReporter(Reporter):
    """
    Forward messages to a `logging.Logger`.
    """

    def __init__(self, logger=None):
        self.logger = logger if logger is not None else log

    def warn(self, message):
        self.logger.warning(message)

    def info(self, message):
        self.logger.info(message)


class RecordingReporter(Reporter):
    """
    Keep every message in call order, optionally forwarding
    them to another reporter.
    """

    def __init__(self, forward=None):
        self.messages = []
        self.forward = forward

    def warn(self, message):
        self.messages.append(('WARN', message))
        if self.forward is not None:
            self.forward.warn(message)

    def info(self, message):
        self.messages.append(('INFO', message))
        if self.forward is not None:
            self.forward.info(message)

    @property
    def warnings(self):
        return [m for level, m in self.messages if level == 'WARN']

    def clear(self):
        self.messages = []


_default = LogReporter()


def get_reporter(reporter=None):
    """
    Return `reporter` or the process-wide default if None.
    """
    if reporter is not None:
        return reporter
    return _default


def set_reporter(reporter):
    """
    Replace the process-wide default reporter.

    Parameters
    ------------
    reporter : Reporter
      New default, used by resolvers called without one

    Returns
    ------------
    previous : Reporter
      The reporter that was replaced
    """
    global _default
    if not isinstance(reporter, Reporter):
        raise TypeError('reporter must be a `Reporter`!')
    previous = _default
    _default = reporter
    return previous
