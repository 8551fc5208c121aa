from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

log = logging.getLogger(__name__)

Tokens = Sequence[str]


@dataclass(frozen=True)
class Partition:
    """
    Decomposition of two token sequences `x` and `y` where

        x == head + x_mid + tail
        y == head + y_mid + tail
    """

    head: Tokens
    x_mid: Tokens
    y_mid: Tokens
    tail: Tokens


def split_common_parts(x: Tokens, y: Tokens) -> Partition:
    log.debug("x=%r, y=%r", x, y)

    length = min(len(x), len(y))

    start = next((i for i in range(length) if x[i] != y[i]), length)

    # The suffix may not reach back past `start` in either sequence, so
    # `end_x + delta >= start` must hold as well as `end_x >= start`.
    delta = len(y) - len(x)
    end_x_lower_bound = start + max(0, -delta)

    end_x = next(
        (
            i + 1
            for i in range(len(x) - 1, end_x_lower_bound - 1, -1)
            if x[i] != y[i + delta]
        ),
        end_x_lower_bound,
    )

    partition = Partition(
        head=x[:start],
        x_mid=x[start:end_x],
        y_mid=y[start : end_x + delta],
        tail=x[end_x:],
    )

    log.debug(
        "head=%d, x_mid=%d, y_mid=%d, tail=%d",
        len(partition.head),
        len(partition.x_mid),
        len(partition.y_mid),
        len(partition.tail),
    )
    return partition
