r"""
Compare lines of text, by one of a few total orders

lexical:  compare code points, like "LC_ALL=C sort"
natural:  compare runs of digits as numbers, so "item2" sorts before "item10"
logical:  compare like a file manager, ignoring case and leading zeros

examples:
  sorted(["item10", "item2"], key=make_policy("natural").key)  # ['item2', 'item10']
  make_policy("lexical", reverse=True).precedes("b", "a")  # True
"""


import functools
import locale
import re


ORDERING_KINDS = ("lexical", "natural", "logical")

DIGIT_RUNS_REGEX = re.compile(r"[0-9]+|[^0-9]+")


def split_runs(line):
    """Split a line into maximal runs of decimal digits and of other chars"""

    runs = DIGIT_RUNS_REGEX.findall(line)

    return runs


def natural_run_key(run, fold):
    """Key one run, so digit runs sort as numbers, and other runs sort as text"""

    if run[0] in "0123456789":
        return (1, int(run), len(run))

    text = run.casefold() if fold else run

    # A run of not digits sorts by its first char against a run of digits
    # every char of such a run falls below "0" or above "9"

    side = 0 if (text < "0") else 2

    return (side, text)


def lexical_key(line, fold=False):
    """Key a line to sort by code point, maybe with case folded"""

    key = line.casefold() if fold else line

    return key


def natural_key(line, fold=False):
    """Key a line to sort in natural order"""

    key = tuple(natural_run_key(_, fold=fold) for _ in split_runs(line))

    return key


def logical_run_key(run):
    """Key one run, to sort like a file manager sorts"""

    if run[0] in "0123456789":
        return (1, int(run))

    text = run.casefold()
    side = 0 if (text < "0") else 2

    return (side, locale.strxfrm(text))


def logical_key(line):
    """Key a line to sort in logical order, breaking ties by code point"""

    runs_key = tuple(logical_run_key(_) for _ in split_runs(line))

    return (runs_key, line)


@functools.total_ordering
class Descending:
    """Wrap a key to sort it the other way"""

    __slots__ = ("key",)

    def __init__(self, key):
        self.key = key

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return other.key < self.key

    def __repr__(self):
        return "Descending({!r})".format(self.key)


class ComparisonPolicy:
    """Order lines by one kind, in one direction, with or without case"""

    def __init__(self, ordering_kind, ignore_case, reverse):

        if ordering_kind not in ORDERING_KINDS:
            raise ValueError(
                "ordering_kind must be one of {}, not {!r}".format(
                    "|".join(ORDERING_KINDS), ordering_kind
                )
            )

        self.ordering_kind = ordering_kind
        self.ignore_case = ignore_case
        self.reverse = reverse

        if ordering_kind == "lexical":
            self.ascending_key = functools.partial(lexical_key, fold=ignore_case)
        elif ordering_kind == "natural":
            self.ascending_key = functools.partial(natural_key, fold=ignore_case)
        else:
            self.ascending_key = logical_key

    def __repr__(self):
        return "ComparisonPolicy({!r}, ignore_case={}, reverse={})".format(
            self.ordering_kind, self.ignore_case, self.reverse
        )

    def key(self, line):
        """Key a line, so that "sorted" and "bisect" apply this policy"""

        key = self.ascending_key(line)
        if self.reverse:
            key = Descending(key)

        return key

    def precedes(self, a, b):
        """Say if line 'a' sorts strictly before line 'b'"""

        return self.key(a) < self.key(b)

    def equivalent(self, a, b):
        """Say if neither line sorts before the other"""

        return not (self.precedes(a, b) or self.precedes(b, a))

    def compare(self, a, b):
        """Return -1, 0, or +1, like the "cmp" of Python 2"""

        if self.precedes(a, b):
            return -1
        if self.precedes(b, a):
            return 1

        return 0


def make_policy(ordering_kind="lexical", ignore_case=False, reverse=False):
    """Pick one of the comparison policies"""

    policy = ComparisonPolicy(
        ordering_kind, ignore_case=bool(ignore_case), reverse=bool(reverse)
    )

    return policy
