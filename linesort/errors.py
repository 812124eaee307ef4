"""
Name the ways a run of linesort can fail
"""


class SortError(Exception):
    """Fail a run of linesort"""


class SourceOpenFailed(SortError):
    """Fail to open one source of lines, but leave earlier lines accepted"""

    def __init__(self, source, reason):
        SortError.__init__(self, source, reason)
        self.source = source
        self.reason = reason

    def __str__(self):
        return "{}: {}".format(self.source, self.reason)


class WriteFailed(SortError):
    """Fail to write a line out, after writing the lines before it"""

    def __init__(self, reason):
        SortError.__init__(self, reason)
        self.reason = reason

    def __str__(self):
        return "write failed: {}".format(self.reason)


class InvalidConfiguration(SortError):
    """Reject options that can't be chosen together, before any I/O begins"""
