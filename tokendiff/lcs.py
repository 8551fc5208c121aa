from __future__ import annotations

import logging
from typing import Generator

from tokendiff.affix import Partition, split_common_parts
from tokendiff.lcs_table import Alignment, LcsTable

log = logging.getLogger(__name__)


def tokenize(text: str, delimiter: str) -> tuple[str, ...]:
    if delimiter == "":
        return tuple(text)
    return tuple(text.split(delimiter))


def partition(x: tuple[str, ...], y: tuple[str, ...], trim: bool = True) -> Partition:
    if trim:
        return split_common_parts(x, y)
    return Partition(head=(), x_mid=x, y_mid=y, tail=())


def diff(original: str, edited: str, delimiter: str, trim: bool = True) -> tuple[int, str]:
    """
    Compare `original` and `edited` token by token.

    Returns the number of tokens that are not part of the longest common
    subsequence, and the common subsequence joined back with `delimiter`.
    """
    x = tokenize(original, delimiter)
    y = tokenize(edited, delimiter)

    parts = partition(x, y, trim)
    table = LcsTable(parts.x_mid, parts.y_mid)

    distance = 0
    chunks: list[str] = list(parts.head)

    for kind, token in table.walk():
        log.debug("%s: %r", kind.name, token)
        if kind == Alignment.SHARED:
            chunks.append(token)
        else:
            distance += 1

    chunks.extend(parts.tail)

    return distance, delimiter.join(chunks)


def alignment(
    original: str, edited: str, delimiter: str, trim: bool = True
) -> Generator[tuple[Alignment, str], None, None]:
    x = tokenize(original, delimiter)
    y = tokenize(edited, delimiter)

    parts = partition(x, y, trim)

    for token in parts.head:
        yield Alignment.SHARED, token

    yield from LcsTable(parts.x_mid, parts.y_mid).walk()

    for token in parts.tail:
        yield Alignment.SHARED, token
