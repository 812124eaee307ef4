"""
Resolve the options of one run of linesort, once, before any I/O begins
"""


import argparse

from linesort.compare import ORDERING_KINDS
from linesort.errors import InvalidConfiguration


class SortConfig(argparse.Namespace):
    """Hold the options of one run, and reject mixes that can't work together"""

    DEFAULTS = dict(
        reverse=False,
        ignore_case=False,
        unique=False,
        ordering_kind="lexical",
        trim=False,
        skip_blank=False,
        wide_encoding=False,
        shuffle=False,
        force_flush=False,
        keep_going=False,
    )

    def __init__(self, **kwargs):

        unknowns = sorted(_ for _ in kwargs.keys() if _ not in SortConfig.DEFAULTS)
        if unknowns:
            raise InvalidConfiguration(
                "unrecognized option(s): {}".format(", ".join(unknowns))
            )

        options = dict(SortConfig.DEFAULTS)
        options.update(kwargs)

        argparse.Namespace.__init__(self, **options)

        self.validate()

    @classmethod
    def from_args(cls, args):
        """Resolve the args parsed from a command line"""

        kinds = list()
        if args.natural:
            kinds.append("natural")
        if args.logical:
            kinds.append("logical")

        if len(kinds) > 1:
            raise InvalidConfiguration(
                "choose at most one of --natural, --logical, not {}".format(
                    " and ".join("--{}".format(_) for _ in kinds)
                )
            )

        ordering_kind = kinds[0] if kinds else "lexical"

        config = cls(
            reverse=args.reverse,
            ignore_case=args.ignore_case,
            unique=args.unique,
            ordering_kind=ordering_kind,
            trim=args.trim,
            skip_blank=args.skip_blank,
            wide_encoding=args.utf16,
            shuffle=args.shuffle,
            force_flush=args.force_flush,
            keep_going=args.keep_going,
        )

        return config

    def validate(self):
        """Raise InvalidConfiguration, unless the options fit together"""

        if self.ordering_kind not in ORDERING_KINDS:
            raise InvalidConfiguration(
                "ordering kind must be one of {}, not {!r}".format(
                    "|".join(ORDERING_KINDS), self.ordering_kind
                )
            )

        if self.shuffle:
            clashes = list()
            if self.reverse:
                clashes.append("--reverse")
            if self.ignore_case:
                clashes.append("--ignore-case")
            if self.unique:
                clashes.append("--unique")
            if self.ordering_kind != "lexical":
                clashes.append("--{}".format(self.ordering_kind))

            if clashes:
                raise InvalidConfiguration(
                    "--shuffle can't be combined with {}".format(", ".join(clashes))
                )

        if self.ignore_case and (self.ordering_kind == "logical"):
            raise InvalidConfiguration(
                "--ignore-case can't be combined with --logical, which ignores case"
            )

    @property
    def encoding(self):
        """Name the text encoding of input and output"""

        return "utf-16" if self.wide_encoding else "utf-8"
