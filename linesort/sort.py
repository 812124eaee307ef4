#!/usr/bin/env python3

r"""
usage: linesort [-h] [--reverse] [--ignore-case] [--unique] [--natural] [--logical]
                [--trim] [--skip-blank] [--utf16] [--shuffle] [--force-flush]
                [--keep-going] [FILE ...]

read every line of input, then write them back out sorted (or shuffled)

positional arguments:
  FILE           a file to read lines from (default: stdin)

options:
  -h, --help     show this help message and exit
  --reverse      sort descending, not ascending
  --ignore-case  ignore the case of letters when sorting
  --unique       drop each line that sorts equal to a line already kept
  --natural      sort runs of digits as numbers, such as 'item2' before 'item10'
  --logical      sort like a file manager, ignoring case and leading zeros
  --trim         strip whitespace and control chars from both ends of each line
  --skip-blank   drop each line holding nothing but whitespace and control chars
  --utf16        read and write utf-16 text, not utf-8 text
  --shuffle      write the lines out in a random order, not sorted
  --force-flush  flush stdout after writing each line
  --keep-going   read the next file, after failing to open a file

quirks:
  writes nothing till after reading every line of every file
  keeps a line longer than 131072 chars once, cut to its first 131072 chars
  keeps lines that sort equal in order of arrival, unless dropped by --unique
  exits 1 after failing to open any file, even when --keep-going reads on

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "sort"
  takes "-" as meaning "/dev/stdin", like linux "sort -", unlike mac "sort -"

examples:
  echo item10 item2 item1 |tr ' ' '\n' |linesort  # item1, item10, item2
  echo item10 item2 item1 |tr ' ' '\n' |linesort --natural  # item1, item2, item10
  linesort --unique --ignore-case a.txt b.txt  # merge two files, dropping dupes
  linesort --shuffle --force-flush words.txt |head -3  # pick three at random
"""

# code reviewed by people, and by Black and Flake8 bots


import argparse
import contextlib
import locale
import os
import sys

from linesort.config import SortConfig
from linesort.emit import emit
from linesort.errors import InvalidConfiguration, SourceOpenFailed, WriteFailed
from linesort.lines import read_incoming, read_source, stderr_print
from linesort.store import make_store


def main(argv=None):
    """Run from the command line"""

    argv = sys.argv if (argv is None) else argv

    parser = compile_argdoc(epi="quirks:")
    args = parser.parse_args(argv[1:])

    try:
        config = SortConfig.from_args(args)
    except InvalidConfiguration as exc:
        parser.error(str(exc))  # exits 2 from rejecting usage

    if config.ordering_kind == "logical":
        collate_as_user()

    outgoing = stdout_text(config.encoding)
    paths = args.files if args.files else ["-"]

    ok = run(config, paths=paths, outgoing=outgoing)

    return 0 if ok else 1


def run(config, paths, outgoing, incoming=None, random_source=None):
    """Read every line of each path, then write them out, and say if all went well

    Read "-" from 'incoming' if given, else from Stdin
    """

    ok = True

    store = make_store(config, random_source=random_source)

    # Read each source in turn

    for path in paths:
        try:
            if (path == "-") and (incoming is not None):
                read_incoming(
                    incoming,
                    store=store,
                    trim=config.trim,
                    skip_blank=config.skip_blank,
                )
            else:
                read_source(
                    path,
                    store=store,
                    encoding=config.encoding,
                    trim=config.trim,
                    skip_blank=config.skip_blank,
                )
        except SourceOpenFailed as exc:
            stderr_print("linesort: error: {}".format(exc))
            ok = False
            if not config.keep_going:
                break

    # Shuffle once, if shuffling

    if config.shuffle:
        store.permute()

    # Write out whatever got read

    try:
        emit(store.drain(), outgoing=outgoing, force_flush=config.force_flush)
    except WriteFailed as exc:
        stderr_print("linesort: error: {}".format(exc))
        ok = False

    return ok


def stdout_text(encoding):
    """Write Stdout as text of the chosen encoding"""

    stdout = sys.stdout
    stdout.reconfigure(encoding=encoding, errors="replace")

    return stdout


def collate_as_user():
    """Collate text by the locale of the user, to sort like a file manager does"""

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        stderr_print("linesort: warning: collating as C, not as user: {}".format(exc))


# deffed in many files  # missing from docs.python.org
def compile_argdoc(epi):
    """Declare how to parse the command line, as per the top-of-file doc"""

    doc = __doc__
    prog = doc.strip().splitlines()[0].split()[1]
    description = list(_ for _ in doc.strip().splitlines() if _)[3]
    epilog_at = doc.index(epi)
    epilog = doc[epilog_at:]

    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        add_help=True,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=epilog,
    )

    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="a file to read lines from (default: stdin)",
    )

    parser.add_argument(
        "--reverse", action="store_true", help="sort descending, not ascending"
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="ignore the case of letters when sorting",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="drop each line that sorts equal to a line already kept",
    )
    parser.add_argument(
        "--natural",
        action="store_true",
        help="sort runs of digits as numbers, such as 'item2' before 'item10'",
    )
    parser.add_argument(
        "--logical",
        action="store_true",
        help="sort like a file manager, ignoring case and leading zeros",
    )
    parser.add_argument(
        "--trim",
        action="store_true",
        help="strip whitespace and control chars from both ends of each line",
    )
    parser.add_argument(
        "--skip-blank",
        action="store_true",
        help="drop each line holding nothing but whitespace and control chars",
    )
    parser.add_argument(
        "--utf16", action="store_true", help="read and write utf-16 text, not utf-8 text"
    )
    parser.add_argument(
        "--shuffle",
        action="store_true",
        help="write the lines out in a random order, not sorted",
    )
    parser.add_argument(
        "--force-flush",
        action="store_true",
        help="flush stdout after writing each line",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="read the next file, after failing to open a file",
    )

    return parser


# deffed in many files  # missing from docs.python.org
class BrokenPipeErrorSink(contextlib.ContextDecorator):
    """Cut unhandled BrokenPipeError down to sys.exit(1)

    Test with large Stdout cut sharply, such as:  linesort words.txt |head

    More narrowly than:  signal.signal(signal.SIGPIPE, handler=signal.SIG_DFL)
    As per https://docs.python.org/3/library/signal.html#note-on-sigpipe
    """

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        (exc_type, exc, exc_traceback,) = exc_info
        if isinstance(exc, BrokenPipeError):  # catch this one

            null_fileno = os.open(os.devnull, os.O_WRONLY)
            os.dup2(null_fileno, sys.stdout.fileno())  # avoid the next one

            sys.exit(1)


def console_main():
    """Run as the "linesort" console script"""

    with BrokenPipeErrorSink():
        sys.exit(main(sys.argv))


if __name__ == "__main__":
    console_main()
