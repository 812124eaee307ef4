r"""
Read logical lines of text from a source, one buffer fill at a time

quirks:
  accepts a line longer than the buffer once, cut to the buffer, and drops the rest of it
  takes "\r\n" and "\r" as line terminators too, like "open" does by default
  decodes each undecodable byte as �, in place of raising UnicodeDecodeError
"""


import sys
import unicodedata

from linesort.errors import SourceOpenFailed


BUFFER_SIZE = 131072  # chars per buffer fill


def is_whitespace(ch):
    """Say if a char is whitespace or a control char"""

    if ch.isspace():
        return True

    return unicodedata.category(ch) == "Cc"


def trim_line(line):
    """Strip whitespace and control chars from both ends of a line"""

    start = 0
    stop = len(line)

    while (start < stop) and is_whitespace(line[start]):
        start += 1
    while (stop > start) and is_whitespace(line[stop - 1]):
        stop -= 1

    return line[start:stop]


def is_blank(line):
    """Say if a line holds nothing but whitespace and control chars"""

    return all(is_whitespace(_) for _ in line)


def iter_lines(incoming, trim=False, skip_blank=False, buffer_size=BUFFER_SIZE):
    """Yield each accepted line of a text stream, without its line terminator"""

    truncated_last = False

    while True:

        # Pull one buffer fill

        chunk = incoming.readline(buffer_size)
        if not chunk:
            break

        truncated_this = not chunk.endswith("\n")
        line = chunk[: -len("\n")] if chunk.endswith("\n") else chunk

        # Drop the continuations of a line that overflowed the buffer

        if truncated_last:
            truncated_last = truncated_this
            continue

        truncated_last = truncated_this

        # Trim, then judge blank

        if trim:
            line = trim_line(line)

        if skip_blank and is_blank(line):
            continue

        yield line


def read_incoming(incoming, store, trim=False, skip_blank=False):
    """Feed each accepted line of an open text stream into a store"""

    for line in iter_lines(incoming, trim=trim, skip_blank=skip_blank):
        store.accept(line)


def read_source(source, store, encoding="utf-8", trim=False, skip_blank=False):
    """Feed each accepted line of a file into a store, or of Stdin if "-"

    Close the file after, but leave Stdin open
    """

    if source == "-":
        prompt_tty_stdin()
        incoming = stdin_text(encoding)
        read_incoming(incoming, store=store, trim=trim, skip_blank=skip_blank)
        return

    try:
        incoming = open(source, mode="r", encoding=encoding, errors="replace")
    except OSError as exc:
        reason = exc.strerror if exc.strerror else type(exc).__name__
        raise SourceOpenFailed(source, reason=reason) from exc

    with incoming:
        read_incoming(incoming, store=store, trim=trim, skip_blank=skip_blank)


def stdin_text(encoding):
    """Read Stdin as text of the chosen encoding"""

    stdin = sys.stdin
    stdin.reconfigure(encoding=encoding, errors="replace")

    return stdin


# deffed in many files  # missing from docs.python.org
def prompt_tty_stdin():
    if sys.stdin.isatty():
        stderr_print("Press ⌃D EOF to quit")


# deffed in many files  # missing from docs.python.org
def stderr_print(*args, **kwargs):
    sys.stdout.flush()
    print(*args, **kwargs, file=sys.stderr)
    sys.stderr.flush()  # esp. when kwargs["end"] != "\n"
