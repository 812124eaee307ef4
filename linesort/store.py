"""
Hold the accepted lines of a run, in order, or shuffled

disciplines:
  ordered-unique  keep lines in policy order, drop a line equal to one already held
  ordered-multi   keep every line in policy order, equal lines in order of arrival
  sequence        keep lines in order of arrival, till permuted once
"""


import sortedcontainers

from linesort.compare import make_policy
from linesort.randomizer import RandomSource


ORDERED_UNIQUE = "ordered-unique"
ORDERED_MULTI = "ordered-multi"
SEQUENCE = "sequence"

DISCIPLINES = (ORDERED_UNIQUE, ORDERED_MULTI, SEQUENCE)


class AggregateStore:
    """Accept lines, maybe permute them once, then drain them once"""

    def __init__(self, discipline, policy=None, random_source=None):

        if discipline not in DISCIPLINES:
            raise ValueError("no such discipline: {!r}".format(discipline))

        if discipline == SEQUENCE:
            if policy is not None:
                raise ValueError("a sequence store keeps no comparison policy")
            if random_source is None:
                random_source = RandomSource()
        else:
            if policy is None:
                raise ValueError("an ordered store needs a comparison policy")

        self.discipline = discipline
        self.policy = policy
        self.random_source = random_source

        if discipline == SEQUENCE:
            self.lines = list()
        else:
            self.lines = sortedcontainers.SortedKeyList(key=policy.key)

        self.permuted = False
        self.drained = False

    def __len__(self):
        return len(self.lines)

    def __repr__(self):
        return "AggregateStore({!r}, policy={!r}, len={})".format(
            self.discipline, self.policy, len(self.lines)
        )

    def accept(self, line):
        """Take in one line, at its place in order"""

        if self.drained:
            raise RuntimeError("can't accept a line after draining the store")

        if self.discipline == SEQUENCE:
            self.lines.append(line)
            return

        lines = self.lines

        if self.discipline == ORDERED_UNIQUE:
            key = self.policy.key(line)
            index = lines.bisect_key_left(key)
            if index < len(lines):
                if not (key < self.policy.key(lines[index])):
                    return  # drop the equal line that arrived later

        lines.add(line)  # after any equal lines, so in order of arrival

    def permute(self):
        """Shuffle the lines once, in a sequence store"""

        if self.discipline != SEQUENCE:
            raise TypeError("can't permute an {} store".format(self.discipline))
        if self.permuted:
            raise RuntimeError("can't permute a store twice")
        if self.drained:
            raise RuntimeError("can't permute a store after draining it")

        self.random_source.shuffle(self.lines)
        self.permuted = True

    def drain(self):
        """Give up the lines, in their final order, once"""

        if self.drained:
            raise RuntimeError("can't drain a store twice")

        self.drained = True

        lines = list(self.lines)
        self.lines = list()

        return iter_drain(lines)


def iter_drain(lines):
    """Yield each line, letting go of it as it goes"""

    lines.reverse()
    while lines:
        yield lines.pop()


def make_store(config, random_source=None):
    """Build the one store that the options of a run call for"""

    if config.shuffle:
        store = AggregateStore(SEQUENCE, random_source=random_source)
        return store

    policy = make_policy(
        config.ordering_kind, ignore_case=config.ignore_case, reverse=config.reverse
    )

    discipline = ORDERED_UNIQUE if config.unique else ORDERED_MULTI
    store = AggregateStore(discipline, policy=policy)

    return store
