from __future__ import annotations

from tokendiff.cmd_base import Base, CompareOptionsMixin
from tokendiff.lcs import partition, tokenize
from tokendiff.lcs_table import LcsTable


class Table(CompareOptionsMixin, Base):
    """Print the LCS table built over the differing middle of two inputs."""

    def run(self) -> None:
        self.define_compare_options()

        x = tokenize(self.read_input(self.paths[0]), self.delimiter)
        y = tokenize(self.read_input(self.paths[1]), self.delimiter)

        parts = partition(x, y, self.trim)
        table = LcsTable(parts.x_mid, parts.y_mid)

        self.stdout.write(table.render())
        self.exit(0)
