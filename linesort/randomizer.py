"""
Draw random indices for shuffle mode, from one lazily seeded generator
"""


import os
import random
import threading


class RandomSource:
    """Seed one generator from entropy at first use, then never again

    Pass a seed to make the draws repeat, such as in a test
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.rng = None
        self.lock = threading.Lock()

    def seeded(self):
        """Fetch the generator, seeding it exactly once"""

        with self.lock:
            if self.rng is None:
                seed = self.seed
                if seed is None:
                    seed = int.from_bytes(os.urandom(8), byteorder="little")
                self.rng = random.Random(seed)

        return self.rng

    def below(self, n):
        """Choose an int uniformly from [0, n)"""

        if n < 1:
            raise ValueError("RandomSource.below needs n >= 1, got {!r}".format(n))

        rng = self.seeded()
        index = rng.randrange(n)

        return index

    def shuffle(self, items):
        """Permute a list in place, every permutation equally likely"""

        for i in reversed(range(1, len(items))):
            j = self.below(i + 1)
            (items[i], items[j],) = (items[j], items[i],)
