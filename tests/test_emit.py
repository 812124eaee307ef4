"""
Test how linesort writes lines out
"""

import errno
import io

import pytest

from linesort.emit import emit
from linesort.errors import WriteFailed


class FlushCountingIO(io.StringIO):
    def __init__(self):
        io.StringIO.__init__(self)
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        io.StringIO.flush(self)


class FailingIO(io.StringIO):
    """Accept some writes, then raise OSError"""

    def __init__(self, ok_writes, exc):
        io.StringIO.__init__(self)
        self.ok_writes = ok_writes
        self.exc = exc

    def write(self, chars):
        if not self.ok_writes:
            raise self.exc
        self.ok_writes -= 1
        return io.StringIO.write(self, chars)


def test_writes_one_line_per_line():
    outgoing = io.StringIO()
    emit(iter(["b", "", "a"]), outgoing=outgoing)
    assert outgoing.getvalue() == "b\n\na\n"


def test_force_flush_flushes_after_each_line():
    outgoing = FlushCountingIO()
    emit(["x", "y", "z"], outgoing=outgoing, force_flush=True)
    assert outgoing.flushes == 3 + 1

    outgoing = FlushCountingIO()
    emit(["x", "y", "z"], outgoing=outgoing)
    assert outgoing.flushes == 1


def test_write_failure_keeps_lines_already_written():
    outgoing = FailingIO(ok_writes=2, exc=OSError(errno.ENOSPC, "No space left"))

    with pytest.raises(WriteFailed) as excinfo:
        emit(["1", "2", "3", "4"], outgoing=outgoing)

    assert outgoing.getvalue() == "1\n2\n"
    assert "No space left" in str(excinfo.value)


def test_broken_pipe_escapes_unconverted():
    outgoing = FailingIO(ok_writes=0, exc=BrokenPipeError(errno.EPIPE, "Broken pipe"))

    with pytest.raises(BrokenPipeError):
        emit(["1"], outgoing=outgoing)
