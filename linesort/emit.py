"""
Write lines out, each followed by one "\\n"
"""


from linesort.errors import WriteFailed


def emit(lines, outgoing, force_flush=False):
    """Write each line in order, maybe flush after each, and flush at the end

    Leave the lines already written as written, if a later write fails
    """

    try:
        for line in lines:
            outgoing.write(line + "\n")
            if force_flush:
                outgoing.flush()
        outgoing.flush()
    except BrokenPipeError:
        raise
    except OSError as exc:
        reason = exc.strerror if exc.strerror else type(exc).__name__
        raise WriteFailed(reason) from exc
