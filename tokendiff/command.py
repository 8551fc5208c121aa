from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from tokendiff.cmd_base import Base
from tokendiff.cmd_diff import Diff
from tokendiff.cmd_table import Table


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "diff": Diff,
        "table": Table,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a tokendiff command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)
        cmd.execute()

        return cmd
