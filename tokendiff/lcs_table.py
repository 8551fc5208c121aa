from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generator, Sequence

from prettytable import HRuleStyle, PrettyTable

log = logging.getLogger(__name__)

TRUNCATE_LENGTH = 5


class Step(Enum):
    BOTH = "both"
    ONLY_X = "only_x"
    ONLY_Y = "only_y"
    TIE = "tie"


class Alignment(Enum):
    SHARED = "shared"
    ONLY_IN_X = "only_in_x"
    ONLY_IN_Y = "only_in_y"


ARROWS: dict[Step, str] = {
    Step.BOTH: "↘",
    Step.ONLY_Y: "↓",
    Step.ONLY_X: "→",
    Step.TIE: "↓ or →",
}


@dataclass(frozen=True)
class Entry:
    length: int
    step: Step


BOUNDARY = Entry(length=0, step=Step.TIE)


class LcsTable:
    """
    Longest common subsequence table over the token sequences `a` and `b`.

    Entry `(i, j)` holds the LCS length of `a[i:]` and `b[j:]` and the move
    that achieves it. Only the `len(a) * len(b)` cells are stored; reading
    anything past the last row or column yields `BOUNDARY`.
    """

    class OutOfBounds(AssertionError):
        pass

    def __init__(self, a: Sequence[str], b: Sequence[str]) -> None:
        self.a: Sequence[str] = a
        self.b: Sequence[str] = b
        self.table: list[Entry] = [BOUNDARY] * (len(a) * len(b))

        log.debug("building %dx%d lcs table", len(a), len(b))
        self._fill()

    @property
    def size(self) -> tuple[int, int]:
        return len(self.a), len(self.b)

    def _fill(self) -> None:
        for i in range(len(self.a) - 1, -1, -1):
            x = self.a[i]
            for j in range(len(self.b) - 1, -1, -1):
                if x == self.b[j]:
                    entry = Entry(self[i + 1, j + 1].length + 1, Step.BOTH)
                else:
                    len_x = self[i + 1, j].length
                    len_y = self[i, j + 1].length

                    if len_x == len_y:
                        entry = Entry(len_x, Step.TIE)
                    elif len_x > len_y:
                        entry = Entry(len_x, Step.ONLY_X)
                    else:
                        entry = Entry(len_y, Step.ONLY_Y)

                self[i, j] = entry

    def _offset(self, x: int, y: int) -> int | None:
        size_x, size_y = self.size
        if 0 <= x < size_x and 0 <= y < size_y:
            return x + y * size_x
        return None

    def __getitem__(self, key: tuple[int, int]) -> Entry:
        offset = self._offset(*key)
        if offset is None:
            return BOUNDARY
        return self.table[offset]

    def __setitem__(self, key: tuple[int, int], entry: Entry) -> None:
        offset = self._offset(*key)
        if offset is None:
            size_x, size_y = self.size
            raise LcsTable.OutOfBounds(
                f"LcsTable write is out of bounds: tried to set ({key[0]}, {key[1]})"
                f" in 0..{size_x} x 0..{size_y}"
            )
        self.table[offset] = entry

    def walk(self) -> Generator[tuple[Alignment, str], None, None]:
        x, y = 0, 0
        size_x, size_y = self.size

        while x < size_x or y < size_y:
            if x == size_x:
                yield Alignment.ONLY_IN_Y, self.b[y]
                y += 1
                continue

            if y == size_y:
                yield Alignment.ONLY_IN_X, self.a[x]
                x += 1
                continue

            step = self[x, y].step

            if step == Step.BOTH:
                yield Alignment.SHARED, self.a[x]
                x += 1
                y += 1
            elif step == Step.ONLY_X:
                yield Alignment.ONLY_IN_X, self.a[x]
                x += 1
            else:
                # ties go to `b`
                yield Alignment.ONLY_IN_Y, self.b[y]
                y += 1

    def render(self) -> str:
        table = PrettyTable(header=False, hrules=HRuleStyle.ALL, align="l")
        table.add_row([""] + [t[:TRUNCATE_LENGTH] for t in self.a])

        for y, token in enumerate(self.b):
            row = [token[:TRUNCATE_LENGTH]]
            for x in range(len(self.a)):
                entry = self[x, y]
                row.append(f"{entry.length} {ARROWS[entry.step]}")
            table.add_row(row)

        return table.get_string() + "\n"

    def __str__(self) -> str:
        return self.render()
