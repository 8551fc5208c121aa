from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Callable, Generator, Mapping, Protocol, TextIO, TypeAlias, cast

import pytest

from tokendiff.cmd_base import Base
from tokendiff.command import Command
from tests.cmd_helpers import CapturedStderr

TokendiffCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, CapturedStderr]

WriteFile: TypeAlias = Callable[[str, str], None]


class TokendiffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> "TokendiffCmdResult": ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def tokendiff_cmd(work_path: Path) -> Generator[TokendiffCmd]:
    to_close = []

    def _tokendiff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> TokendiffCmdResult:
        env = env or {}
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = CapturedStderr()
        to_close.append(stderr)
        cmd = Command.execute(
            work_path,
            cast(dict[str, str], dict(env)),
            ["tokendiff"] + list(argv),
            stdin,
            stdout,
            cast(TextIO, stderr),
        )
        return cmd, stdin, stdout, stderr

    yield _tokendiff_cmd

    for s in to_close:
        s.close()
