from __future__ import annotations

from tokendiff.cmd_base import Base, CompareOptionsMixin
from tokendiff.cmd_color import ALIGNMENT_FORMATS, ALIGNMENT_SYMBOLS
from tokendiff.lcs import alignment, diff
from tokendiff.lcs_table import Alignment


class Diff(CompareOptionsMixin, Base):
    """
    Compare two inputs token by token.

    Prints `distance <n>` followed by the merged common subsequence, or the
    full alignment when `--alignment` is given. Exits with status 1 when the
    inputs differ.
    """

    def run(self) -> None:
        self.show_alignment = False
        self.define_compare_options()

        original = self.read_input(self.paths[0])
        edited = self.read_input(self.paths[1])

        distance, merged = diff(original, edited, self.delimiter, self.trim)

        self.println(f"distance {distance}")

        if self.show_alignment:
            self.print_alignment(original, edited)
        else:
            self.println(merged)

        self.exit(0 if distance == 0 else 1)

    def handle_option(self, arg: str) -> None:
        if arg in ("-a", "--alignment"):
            self.show_alignment = True
        else:
            super().handle_option(arg)

    def print_alignment(self, original: str, edited: str) -> None:
        for kind, token in alignment(original, edited, self.delimiter, self.trim):
            self.println(self.alignment_fmt(kind, ALIGNMENT_SYMBOLS[kind] + token))

    def alignment_fmt(self, kind: Alignment, text: str) -> str:
        return self.fmt(ALIGNMENT_FORMATS[kind], text)
